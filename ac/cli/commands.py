"""CLI Commands"""

import sys

import argcomplete

from ac.output import dim


def run_completion(shell: str) -> int:
    """Print the tab completion script for `shell` to stdout."""
    print(dim(f"Generating completion script for {shell}..."), file=sys.stderr)
    print(argcomplete.shellcode(['ac'], shell=shell))
    return 0
