"""Commit Orchestrator - Write the staged index as a new commit on HEAD."""

from dataclasses import dataclass, field

import pygit2

from ac.errors import NoParentCommit, NothingToCommit, RepositoryAccessFailure


@dataclass
class CommitResult:
    """The commit that was written and where it landed."""
    oid: pygit2.Oid
    tree_id: pygit2.Oid
    parents: list[pygit2.Oid] = field(default_factory=list)
    branch: str = ""

    @property
    def short_id(self) -> str:
        return str(self.oid)[:7]

    @property
    def is_root(self) -> bool:
        return len(self.parents) == 0


def resolve_parent(repo: pygit2.Repository) -> pygit2.Commit:
    """Return the commit HEAD points to.

    Raises NoParentCommit when HEAD is unborn (no commits on the branch yet).
    """
    if repo.head_is_unborn:
        raise NoParentCommit("HEAD has no commits yet")
    try:
        return repo.head.peel(pygit2.Commit)
    except (KeyError, pygit2.GitError) as e:
        raise RepositoryAccessFailure(f"Could not resolve HEAD: {e}")


def _default_signature(repo: pygit2.Repository) -> pygit2.Signature:
    try:
        return repo.default_signature
    except (KeyError, pygit2.GitError):
        raise RepositoryAccessFailure(
            "No author identity configured, set user.name and user.email with git config"
        )


def _write_tree(repo: pygit2.Repository) -> pygit2.Oid:
    try:
        return repo.index.write_tree()
    except (pygit2.GitError, OSError) as e:
        raise RepositoryAccessFailure(f"Could not write tree from index: {e}")


def _is_empty_commit(repo: pygit2.Repository, parent: pygit2.Commit | None, tree_id: pygit2.Oid) -> bool:
    if parent is None:
        return len(repo[tree_id]) == 0
    return parent.tree_id == tree_id


def commit_staged(repo: pygit2.Repository, message: str, allow_empty: bool = True) -> CommitResult:
    """Commit the index to the current branch and advance it.

    An unborn HEAD produces a root commit. With allow_empty=False a commit
    whose tree matches its parent's (or is empty, for a root commit) is
    refused with NothingToCommit.
    """
    # Identity first so nothing is written without an author
    signature = _default_signature(repo)

    try:
        parent = resolve_parent(repo)
        parents = [parent.id]
    except NoParentCommit:
        parent = None
        parents = []

    tree_id = _write_tree(repo)

    if not allow_empty and _is_empty_commit(repo, parent, tree_id):
        raise NothingToCommit("Nothing to commit, the staged tree matches HEAD")

    try:
        oid = repo.create_commit(
            'HEAD',      # advances the branch HEAD points to, creating it if unborn
            signature,   # author
            signature,   # committer
            message,
            tree_id,
            parents,
        )
    except (pygit2.GitError, OSError) as e:
        raise RepositoryAccessFailure(f"Could not write commit: {e}")

    return CommitResult(
        oid=oid,
        tree_id=tree_id,
        parents=parents,
        branch=repo.head.shorthand,
    )
