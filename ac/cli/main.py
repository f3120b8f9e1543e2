"""CLI Main Entry Point"""

import sys

from ac.config import Config, load_config
from ac.errors import AcError
from ac.git import CommitResult, commit_staged, open_repository, resolve_directory, stage_all, staged_paths
from ac.output import bold, info, print_error, print_success, print_verbose, colorize_commit_type
from ac.prompts import collect_input, make_commit_message
from ac.session import PromptSession, get_session

from ac.cli.args import parse_args
from ac.cli.commands import run_completion

STAGING_MODES = {'ac', 'a'}
COMMIT_MODES = {'ac', 'c'}


def _apply_overrides(args, config: Config) -> Config:
    """Apply CLI flags on top of the environment config.

    Precedence: CLI args > environment variables > defaults
    """
    if args.mode:
        config.mode = args.mode
    if args.verbose:
        config.verbose = True
    if args.no_empty:
        config.allow_empty = False
    return config


def _stage(repo, config: Config) -> None:
    if config.verbose:
        print_verbose(f"Staging all changes in {repo.workdir}")
    stage_all(repo)
    if config.verbose:
        paths = staged_paths(repo)
        print_verbose(f"Staged {len(paths)} path(s)")
        for path in paths:
            print_verbose(f"  {path}")


def _report(result: CommitResult, message: str) -> None:
    """Print `[branch (root-commit) abc1234] subject` like git does."""
    subject = message.split('\n', 1)[0]
    root = " (root-commit)" if result.is_root else ""
    print_success(f"[{info(result.branch)}{root} {bold(result.short_id)}] {colorize_commit_type(subject)}")


def _commit(repo, config: Config, session: PromptSession) -> CommitResult:
    if config.verbose:
        print_verbose(f"Prompting via {session.name}")
    collected = collect_input(session)
    message = make_commit_message(collected)

    result = commit_staged(repo, message, allow_empty=config.allow_empty)

    if config.verbose:
        parents = ', '.join(str(p)[:7] for p in result.parents) or 'none (root commit)'
        print_verbose(f"Parents: {parents}")
        print_verbose(f"Tree: {result.tree_id}")
        print_verbose(f"Commit: {result.oid}")
    _report(result, message)
    return result


def _run(args, config: Config) -> None:
    directory = resolve_directory(args.dir)
    repo = open_repository(directory)
    if config.verbose:
        print_verbose(f"Repository: {repo.workdir or repo.path}")
        print_verbose(f"Config: {config.to_dict()}")

    if config.mode in STAGING_MODES:
        _stage(repo, config)
    if config.mode in COMMIT_MODES:
        _commit(repo, config, get_session())


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    # Completion never touches a repository
    if args.mode == 'completion':
        return run_completion(args.shell)

    config = _apply_overrides(args, load_config())

    try:
        _run(args, config)
    except AcError as e:
        print_error(str(e))
        return 1
    except ValueError as e:
        # Blank summary or a malformed change type label
        print_error(str(e))
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
