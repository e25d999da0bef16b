"""Command-line argument parsing for git-desk."""

import argparse
from typing import Optional, Sequence

from git_desk.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the git-desk argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-desk",
        description="Git worktree desks and stacked branches on top of git-spice",
        epilog="A worktree directory named desk-<id> belongs to the branch main-desk-<id>; "
        "any other worktree belongs to main.",
        allow_abbrev=False,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-desk {__version__}")
    parser.add_argument("--main-branch", help="Main branch name (default: main)")
    parser.add_argument(
        "--stack-command", help="Stacking tool executable (default: gs)"
    )

    # -v/--debug are also accepted after gotomain and newbranch; SUPPRESS keeps
    # the subcommand from resetting a value given before it
    output_flags = argparse.ArgumentParser(add_help=False)
    output_flags.add_argument("-v", "--verbose", action="store_true", default=argparse.SUPPRESS)
    output_flags.add_argument("--debug", action="store_true", default=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    subparsers.add_parser(
        "gotomain",
        help="Switch this worktree to its main branch (main-desk-<id> or main)",
        parents=[output_flags],
        allow_abbrev=False,
    )

    newbranch = subparsers.add_parser(
        "newbranch",
        help="Create a branch from the staged changes, track it and commit them",
        parents=[output_flags],
        allow_abbrev=False,
    )
    newbranch.add_argument("name", nargs="?", help="Name of the new branch")
    newbranch.add_argument("-m", "--message", help="Commit message (default: open the editor)")

    subparsers.add_parser(
        "submit",
        help="Submit the current branch, titled after its latest commit",
        description="Any further flags (--draft, --update-only, ...) are passed to "
        "'gs branch submit' unchanged.",
        allow_abbrev=False,
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Unrecognised arguments are only allowed for ``submit``, where they are
    kept in order as ``passthrough``.
    """
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if extras and args.command != "submit":
        parser.error(f"unrecognized arguments: {' '.join(extras)}")
    args.passthrough = extras
    return args


# Global options and whether they take a value
GLOBAL_OPTIONS = {
    "-v": False,
    "--verbose": False,
    "--debug": False,
    "--version": False,
    "--main-branch": True,
    "--stack-command": True,
}


def split_global_options(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split leading global options off an argument list.

    Used by the standalone scripts, which insert their subcommand after the
    global options. Scanning stops at the first argument that is not a global
    option, so everything after it (e.g. submit passthrough flags) is kept as is.

    Returns:
        (global_options, rest)
    """
    args = list(argv)
    index = 0
    while index < len(args):
        name = args[index].split("=", 1)[0]
        if name not in GLOBAL_OPTIONS:
            break
        takes_value = GLOBAL_OPTIONS[name] and "=" not in args[index]
        index += 2 if takes_value else 1
    return args[:index], args[index:]
