"""CLI Argument Parsing"""

import argparse
import argcomplete

from gemini_commit import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='gcm',
        description='Generate a commit message for staged changes with Gemini',
        epilog='Example: git add -p && gcm'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    # Generation options
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Gemini model id (default: from config or GEMINI_MODEL)')

    # Commit options
    parser.add_argument('-y', '--yes', action='store_true', help='Commit without asking for confirmation')
    parser.add_argument('-n', '--dry-run', action='store_true', help='Print the suggested message only, never commit')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (prompt size, tokens used, timings)')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
