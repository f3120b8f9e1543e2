"""Git Operations Package"""

from ac.git.committer import CommitResult, commit_staged, resolve_parent
from ac.git.repository import open_repository, resolve_directory
from ac.git.staging import stage_all, staged_paths

__all__ = [
    "CommitResult",
    "commit_staged",
    "resolve_parent",
    "open_repository",
    "resolve_directory",
    "stage_all",
    "staged_paths",
]
