"""Display and formatting service for git-desk output"""
from typing import Optional

from rich.console import Console
from rich.markup import escape

from git_desk.constants import CLI_COLORS, SYMBOL_SUCCESS
from git_desk.models.results import NewBranchResult, SubmitResult

console = Console()
error_console = Console(stderr=True)


class DisplayService:
    """Prints workflow results and errors for the operator."""

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None):
        self.out = out or console
        self.err = err or error_console

    def print_error(self, message: str) -> None:
        self.err.print(f"[{CLI_COLORS['error']}]Error: {escape(message)}[/{CLI_COLORS['error']}]")

    def print_warning(self, message: str) -> None:
        self.err.print(f"[{CLI_COLORS['warning']}]{escape(message)}[/{CLI_COLORS['warning']}]")

    def print_status(self, status: str) -> None:
        """Print `git status -sb` output as-is."""
        self.out.print(escape(status), highlight=False)

    def print_switch_tip(self, branch: str, remote: str, main_branch: str) -> None:
        """Explain how to create a desk main branch that does not exist yet."""
        self.err.print(f"Could not switch to '{escape(branch)}'. Does it exist locally?")
        self.err.print(f"Tip: create it first (tracking {escape(remote)}/{escape(main_branch)}) from your main clone:")
        self.err.print(f"  [{CLI_COLORS['info']}]git branch {escape(branch)} {escape(remote)}/{escape(main_branch)}[/{CLI_COLORS['info']}]")

    def print_usage(self, usage: str) -> None:
        self.err.print(f"usage: {escape(usage)}")

    def print_new_branch(self, result: NewBranchResult) -> None:
        message = f"Created '{escape(result.branch)}' from '{escape(result.start_branch)}'"
        if result.stacked:
            message += f", stacked onto {escape(result.stacked_onto)}"
        self.out.print(f"[{CLI_COLORS['success']}]{SYMBOL_SUCCESS} {message}.[/{CLI_COLORS['success']}]")

    def print_submitting(self, request: SubmitResult) -> None:
        self.out.print(
            f"Submitting '{escape(request.branch)}' with title: \"{escape(request.title)}\" "
            "and (effectively) empty description",
            highlight=False,
        )
