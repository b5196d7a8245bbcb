"""SVCS command line interface.

Commands: config, add, log, commit, checkout. Every run bootstraps the
``vcs/`` control directory of the working directory if it is missing.
"""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..config import ConfigLoader
from ..core.engine import CommitEngine
from ..core.repository import Repository
from ..core.snapshot_store import is_valid_commit_id
from ..core.types import (
    CommitNotFoundError,
    EmptyMessageError,
    InvalidPathError,
    PathNotFoundError,
    StorageError,
    ValidationError,
)
from ..utils.env import enable_debug_mode, get_repository_root
from ..utils.log import log_debug, log_error


HELP_TEXT = """These are SVCS commands:
config     Get and set a username.
add        Add a file to the index.
log        Show commit logs.
commit     Save changes.
checkout   Restore a file."""

COMMANDS = ("config", "add", "log", "commit", "checkout")
HELP_FLAGS = ("--help", "-h")
VERSION_FLAGS = ("--version", "-v")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svcs",
        description="SVCS - a minimal single-user version control system",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("config", help="Get and set a username")
    subparsers.add_parser("add", help="Add a file to the index")
    subparsers.add_parser("log", help="Show commit logs")
    subparsers.add_parser("commit", help="Save changes")
    subparsers.add_parser("checkout", help="Restore a commit")

    return parser


def split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split into the global options and the command with its operands.

    Only tokens before the command are treated as options, so operands such
    as ``-wip`` or ``--debug`` after the command reach the command unchanged.
    """
    for i, token in enumerate(argv):
        if not token.startswith("-"):
            return argv[:i], argv[i:]
    return argv, []


def main(args: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if args is None else args)
    options, command_args = split_argv(argv)

    wants_version = any(flag in options for flag in VERSION_FLAGS)
    if any(flag in options for flag in HELP_FLAGS) or not (command_args or wants_version):
        print(HELP_TEXT)
        return 0
    if command_args and command_args[0] not in COMMANDS:
        print(f"'{command_args[0]}' is not a SVCS command.")
        return 0

    # Operands never go through argparse: the command takes the first one as
    # is and ignores the rest.
    parsed, unknown = create_parser().parse_known_args(options + command_args[:1])
    parsed.operand = command_args[1] if len(command_args) > 1 else None
    if parsed.debug:
        enable_debug_mode()
    if unknown:
        log_debug(f"Ignoring options: {' '.join(unknown)}")
    if len(command_args) > 2:
        log_debug(f"Ignoring extra arguments: {' '.join(command_args[2:])}")

    repo = Repository(get_repository_root())
    try:
        repo.init()
        return dispatch(parsed, repo)
    except (StorageError, OSError) as e:
        log_error(str(e))
        return 1


def dispatch(parsed: argparse.Namespace, repo: Repository) -> int:
    log_debug(f"Running {parsed.command} in {repo.root}")
    if parsed.command == "config":
        return cmd_config(parsed, repo)
    if parsed.command == "add":
        return cmd_add(parsed, repo)
    if parsed.command == "log":
        return cmd_log(repo)
    if parsed.command == "commit":
        return cmd_commit(parsed, repo)
    if parsed.command == "checkout":
        return cmd_checkout(parsed, repo)

    print(HELP_TEXT)
    return 0


def cmd_config(args: argparse.Namespace, repo: Repository) -> int:
    loader = ConfigLoader(repo)
    if args.operand is not None:
        try:
            name = loader.set_username(args.operand)
        except ValidationError:
            print("Please, tell me who you are.")
            return 0
        print(f"The username is {name}.")
        return 0

    name = loader.get_username()
    if not name:
        print("Please, tell me who you are.")
    else:
        print(f"The username is {name}.")
    return 0


def cmd_add(args: argparse.Namespace, repo: Repository) -> int:
    engine = CommitEngine(repo)
    if args.operand is None:
        tracked = engine.index.list()
        if not tracked:
            print("Add a file to the index.")
            return 0
        print("Tracked files:")
        for path in tracked:
            print(path)
        return 0

    try:
        engine.index.track(args.operand)
    except PathNotFoundError:
        print(f"Can't find '{args.operand}'.")
        return 0
    except InvalidPathError as e:
        print(f"Can't track '{args.operand}': {e.reason}.")
        return 0

    print(f"The file '{args.operand}' is tracked.")
    return 0


def cmd_log(repo: Repository) -> int:
    entries = CommitEngine(repo).history()
    if not entries:
        print("No commits yet.")
        return 0

    for entry in entries:
        print(f"commit {entry.commit_id}")
        print(f"Author: {entry.author}")
        print(entry.message)
        print()
    return 0


def cmd_commit(args: argparse.Namespace, repo: Repository) -> int:
    if args.operand is None:
        print("Message was not passed.")
        return 0

    config = ConfigLoader(repo).load()
    engine = CommitEngine(repo, digest=config.digest)
    try:
        outcome = engine.commit(args.operand, author=config.username or "")
    except EmptyMessageError:
        print("Message was not passed.")
        return 0
    except PathNotFoundError as e:
        print(f"Can't find '{e.path}'.")
        return 0

    if outcome.committed:
        print("Changes are committed.")
    else:
        print("Nothing to commit.")
    return 0


def cmd_checkout(args: argparse.Namespace, repo: Repository) -> int:
    if args.operand is None:
        print("Commit id was not passed.")
        return 0

    if not is_valid_commit_id(args.operand):
        print("Commit does not exist.")
        return 0

    try:
        result = CommitEngine(repo).checkout(args.operand)
    except CommitNotFoundError:
        print("Commit does not exist.")
        return 0

    print(f"Switched to commit {result.commit_id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
