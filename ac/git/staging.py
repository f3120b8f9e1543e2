"""Staging - Add every working-directory change to the index."""

import pygit2
from pygit2.enums import FileStatus

from ac.errors import IoFailure, RepositoryAccessFailure

INDEX_CHANGES = (
    FileStatus.INDEX_NEW
    | FileStatus.INDEX_MODIFIED
    | FileStatus.INDEX_DELETED
    | FileStatus.INDEX_RENAMED
    | FileStatus.INDEX_TYPECHANGE
)


def stage_all(repo: pygit2.Repository) -> None:
    """Stage new, modified and deleted files (like `git add -A`).

    Ignored files are left alone. Running it on a clean tree is a no-op.
    """
    if repo.is_bare:
        raise RepositoryAccessFailure("Cannot stage changes in a bare repository")

    try:
        # add_all also drops entries whose files are gone from the working tree
        index = repo.index
        index.add_all()
        index.write()
    except pygit2.GitError as e:
        raise RepositoryAccessFailure(f"Could not stage changes: {e}")
    except OSError as e:
        raise IoFailure(f"Could not read working directory {repo.workdir}: {e}")


def staged_paths(repo: pygit2.Repository) -> list[str]:
    """Paths whose index entry differs from HEAD, sorted."""
    try:
        status = repo.status()
    except pygit2.GitError as e:
        raise RepositoryAccessFailure(f"Could not read repository status: {e}")
    return sorted(path for path, flags in status.items() if flags & INDEX_CHANGES)
