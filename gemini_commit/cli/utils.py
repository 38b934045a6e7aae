"""CLI Utility Functions"""

from gemini_commit.output import dim

AFFIRMATIVE_ANSWERS = {'y', 'yes'}


def is_confirmation(answer: str) -> bool:
    """True for 'y' or 'yes' in any case, ignoring surrounding whitespace."""
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def ask_confirmation() -> bool:
    """Ask whether to commit. EOF and Ctrl-C count as no."""
    try:
        answer = input(f"Do you want to commit with this message? {dim('(y/n)')}: ")
    except (KeyboardInterrupt, EOFError):
        print()
        return False
    return is_confirmation(answer)
