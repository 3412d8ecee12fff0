# githug Console Output
# Rich-based console output for user-friendly display

from typing import TYPE_CHECKING, Iterable, Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from githug.config import GithugConfig
    from githug.git.branch import BranchInfo
    from githug.git.history import HistoryEntry
    from githug.git.status import StatusEntry


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for repository operations.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(no_color=not colored, highlight=False)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def print_bullets(self, header: str, items: Iterable[str]) -> None:
        """
        Print a header followed by one bullet per item.

        Args:
            header: Line introducing the list, e.g. "Staged these paths:".
            items: Bullet texts.
        """
        lines = [header]
        lines.extend(f"  • {escape(item)}" for item in items)
        self._console.print("\n".join(lines))

    def print_status_table(self, entries: list["StatusEntry"]) -> None:
        """Print the status table, or a note when the tree is clean."""
        if not entries:
            self._console.print("[dim]Working tree clean[/dim]")
            return

        styles = {"staged": "green", "unstaged": "red", "untracked": "yellow", "tracked": "dim"}

        table = Table(show_header=True, header_style="bold")
        table.add_column("i", justify="right", style="dim")
        table.add_column("Status")
        table.add_column("Path", style="cyan")
        table.add_column("Change")

        for entry in entries:
            status = entry.status.value
            style = styles.get(status, "white")
            table.add_row(str(entry.i), f"[{style}]{status}[/{style}]", escape(entry.path), entry.change.value)

        self._console.print(table)

    def print_history(self, entries: list["HistoryEntry"], short_sha_length: int = 7) -> None:
        """Print commit history, newest first."""
        if not entries:
            self._console.print("[dim]No commits yet[/dim]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("SHA", style="yellow")
        table.add_column("When")
        table.add_column("Author")
        table.add_column("Message")
        if self.verbose:
            table.add_column("Email", style="dim")

        for entry in entries:
            row = [
                entry.sha[:short_sha_length],
                entry.when.strftime("%Y-%m-%d %H:%M"),
                escape(entry.author),
                escape(entry.summary),
            ]
            if self.verbose:
                row.append(escape(entry.email))
            table.add_row(*row)

        self._console.print(table)

    def print_branches(self, branches: list["BranchInfo"]) -> None:
        """Print branches, marking the current one."""
        if not branches:
            self._console.print("[dim]No branches yet[/dim]")
            return

        for branch in branches:
            marker = "[green]*[/green]" if branch.current else " "
            name = f"[green]{escape(branch.name)}[/green]" if branch.current else escape(branch.name)
            tip = f" [dim]{branch.tip}[/dim]" if self.verbose and branch.tip else ""
            self._console.print(f"{marker} {name}{tip}")


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)


def get_console(settings: Optional["GithugConfig"] = None) -> Console:
    """Create a console configured from the tool settings."""
    if settings is None:
        from githug.config import get_settings

        settings = get_settings()
    return create_console(verbose=settings.output.verbose, colored=settings.output.colored)
