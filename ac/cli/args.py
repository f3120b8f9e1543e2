"""CLI Argument Parsing"""

import argparse
import argcomplete
from argcomplete.completers import DirectoriesCompleter

from ac import __version__

COMPLETION_SHELLS = ['bash', 'zsh', 'fish', 'tcsh', 'powershell']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ac',
        description='Stage changes and write a Conventional Commit interactively',
        epilog='Example: ac (add everything, then commit)'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-d', dest='dir', metavar='DIR', help='Directory of the repo.').completer = DirectoriesCompleter()
    parser.add_argument('--verbose', action='store_true', default=None, help='Show what is staged and committed')
    parser.add_argument('--no-empty', action='store_true', help='Refuse to commit when nothing changed')

    # Modes
    modes = parser.add_subparsers(dest='mode', metavar='MODE')
    modes.add_parser('ac', help='Add and commit (default behavior).')
    modes.add_parser('c', help='Commit only.')
    modes.add_parser('a', help='Add only.')

    # Completion
    completion = modes.add_parser('completion', help='Generate completion scripts')
    completion.add_argument('shell', choices=COMPLETION_SHELLS, help='Shell to generate completion script for.')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
