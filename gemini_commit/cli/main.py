"""CLI Main Entry Point"""

import os
import time

from gemini_commit.config import Config, load_config
from gemini_commit.git import GitAnalyzer, GitError
from gemini_commit.llm import GeminiClient, LLMError, LLMResponse
from gemini_commit.prompts import build_prompt
from gemini_commit.output import bold, dim, info, print_error, print_success, Spinner, colorize_commit_type

from gemini_commit.cli.args import parse_args
from gemini_commit.cli.commands import display_config, run_install_completion
from gemini_commit.cli.utils import ask_confirmation


def _display_message(message):
    """Display the suggested message between horizontal rules."""
    width = max(len(message), 40)
    print(f"\n{bold('Generated commit message:')}")
    print(dim('─' * width))
    print(colorize_commit_type(message))
    print(f"{dim('─' * width)}\n")


def _print_verbose_stats(args, prompt, response: LLMResponse, timings):
    """Print prompt size, token usage and timings."""
    if not args.verbose:
        return
    print(dim(f"  Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars)"))
    print(dim(f"  Response: {response.tokens_used} tokens"))
    print(dim(f"  Timings: git={timings['git']:.2f}s, generate={timings['generate']:.2f}s"))


def _resolve_model(args, config: Config) -> str:
    """Precedence: CLI args > environment variables > config file"""
    return args.model or os.environ.get('GEMINI_MODEL') or config.model


def _should_commit(args, config: Config) -> bool:
    if args.yes or not config.confirm:
        return True
    return ask_confirmation()


def _generate_commit_flow(args, config: Config) -> int:
    """Check environment, read the staged diff, generate, confirm, commit.

    Returns:
        int: Exit code
    """
    print(bold("Gemini Git Commit Generator"))
    timings = {}

    client = GeminiClient(model=_resolve_model(args, config), host=config.api_host)
    print_success("API key found")

    t0 = time.time()
    analyzer = GitAnalyzer()
    print_success("Git repository detected")

    print(dim("Getting staged changes..."))
    diff = analyzer.get_staged_diff()
    timings['git'] = time.time() - t0
    print_success(f"Found {len(diff)} characters of staged changes")

    prompt = build_prompt(diff)
    print(f"Generating commit message with {info(client.name)}...")
    t0 = time.time()
    with Spinner():
        response = client.generate(prompt)
    timings['generate'] = time.time() - t0

    _print_verbose_stats(args, prompt, response, timings)
    message = response.content
    _display_message(message)

    if args.dry_run:
        return 0

    if not _should_commit(args, config):
        print(dim("Commit cancelled"))
        return 0

    output = analyzer.commit(message)
    print(f"Git output: {output}", end='' if output.endswith('\n') else '\n')
    print_success("Successfully committed!")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    if args.install_completion:
        return run_install_completion()
    if args.display_config:
        return display_config()

    config = load_config()

    try:
        return _generate_commit_flow(args, config)
    except (GitError, LLMError) as e:
        print_error(str(e))
        return 1
