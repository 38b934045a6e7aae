"""Prompt Builder - Construct the Gemini prompt for commit message generation."""

from gemini_commit import COMMIT_TYPE_NAMES

MAX_SUBJECT_LENGTH = 50

PROMPT_TEMPLATE = """\
Generate a short git commit message for these changes:

{diff}

Rules:
- Use format: type: description
- Types: {types}
- Keep under {max_length} characters
- Be specific

Just return the commit message, nothing else:"""


def build_prompt(diff: str) -> str:
    """Embed the raw staged diff in the fixed commit-message prompt."""
    return PROMPT_TEMPLATE.format(
        diff=diff,
        types=', '.join(COMMIT_TYPE_NAMES),
        max_length=MAX_SUBJECT_LENGTH,
    )
