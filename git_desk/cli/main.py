"""Command-line entry points for git-desk"""

import sys
from typing import Optional, Sequence

from git_desk.cli.args import parse_args, split_global_options
from git_desk.config import load_config
from git_desk.core.desk_keeper import DeskKeeper
from git_desk.exceptions import GitDeskError, MissingArgumentError
from git_desk.logging_config import setup_logging, get_logger
from git_desk.services.display_service import DisplayService

logger = get_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    display = DisplayService()
    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        # Unset flags come through as None and leave file/default values alone
        config = load_config(
            main_branch=parsed_args.main_branch,
            stack_command=parsed_args.stack_command,
            verbose=parsed_args.verbose or None,
            debug=parsed_args.debug or None,
        )

        if parsed_args.debug:
            display.err.print("[yellow]Debug mode enabled[/yellow]")
            display.err.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                display.err.print(f"  {key}: {value!r}", markup=False)

        keeper = DeskKeeper(config=config, display=display)

        if parsed_args.command == "gotomain":
            keeper.goto_main()
        elif parsed_args.command == "newbranch":
            keeper.new_branch(parsed_args.name, message=parsed_args.message)
        elif parsed_args.command == "submit":
            keeper.submit(parsed_args.passthrough)

        return 0
    except KeyboardInterrupt:
        display.print_warning("\nOperation cancelled by user")
        return 1
    except MissingArgumentError as e:
        display.print_usage(e.usage or parsed_args.command)
        return 1
    except (GitDeskError, ValueError) as e:
        logger.debug(f"{parsed_args.command} failed", exc_info=True)
        display.print_error(str(e))
        return 1


def _run_script(command: str) -> int:
    global_options, rest = split_global_options(sys.argv[1:])
    return main([*global_options, command, *rest])


def gotomain() -> int:
    """Console script for `git-desk gotomain`."""
    return _run_script("gotomain")


def newbranch() -> int:
    """Console script for `git-desk newbranch`."""
    return _run_script("newbranch")


def submit_branch() -> int:
    """Console script for `git-desk submit`."""
    return _run_script("submit")


if __name__ == "__main__":
    sys.exit(main())
