"""Repository Access - Locate and open the git repository."""

from pathlib import Path

import pygit2

from ac.errors import IoFailure, RepositoryAccessFailure


def resolve_directory(directory: str | Path | None = None) -> Path:
    """Resolve DIR against the current directory (absolute DIR wins)."""
    try:
        cwd = Path.cwd()
    except OSError as e:
        raise IoFailure(f"Could not read current directory: {e}")
    return cwd / directory if directory else cwd


def open_repository(directory: str | Path) -> pygit2.Repository:
    """Open the repository containing `directory`, searching parent directories."""
    path = Path(directory)
    if not path.is_dir():
        raise IoFailure(f"Not a directory: {path}")

    try:
        git_dir = pygit2.discover_repository(str(path))
    except pygit2.GitError as e:
        raise RepositoryAccessFailure(f"Could not search for a repository from {path}: {e}")
    if git_dir is None:
        raise RepositoryAccessFailure(f"Not inside a git repository: {path}")

    try:
        return pygit2.Repository(git_dir)
    except pygit2.GitError as e:
        raise RepositoryAccessFailure(f"Could not open repository at {git_dir}: {e}")
