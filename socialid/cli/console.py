"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from socialid.domain.social.model.profile import IdentifiedUser, UserProfile


class Console:
    """CLI output manager wrapping rich."""

    def __init__(
        self,
        *,
        force_terminal: bool | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the console.

        Args:
            force_terminal: Force terminal mode (True/False) or auto-detect (None).
            quiet: Suppress non-essential output.
        """
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)
        self._quiet = quiet

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{message}[/dim]")

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def table(
        self,
        rows: list[dict[str, Any]],
        columns: list[tuple[str, str]],  # (key, header)
        *,
        title: str | None = None,
    ) -> None:
        """Print a table.

        Args:
            rows: List of dicts containing row data.
            columns: List of (key, header) tuples defining columns.
            title: Optional table title.
        """
        table = Table(title=title, show_header=True, header_style="bold")
        for _, header in columns:
            table.add_column(header)
        for row in rows:
            table.add_row(*(str(row.get(key, "")) for key, _ in columns))
        self._console.print(table)

    def identity(self, user: IdentifiedUser) -> None:
        """Print a resolved identity."""
        lines = [f"[cyan]Provider:[/cyan] {user.provider}"]
        if user.user is not None:
            lines.extend(self._profile_lines(user.user))
        if user.token:
            lines.append(f"[cyan]Token:[/cyan] {user.token[:12]}…")
        self._console.print(
            Panel("\n".join(lines), title=f"[bold]{user.id}[/bold]", border_style="blue")
        )

    def profile(self, profile: UserProfile) -> None:
        """Print a user profile."""
        content = "\n".join(self._profile_lines(profile)) or "[dim]No details available[/dim]"
        self._console.print(Panel(content, title=profile.identified_id, border_style="blue"))

    @staticmethod
    def _profile_lines(profile: UserProfile) -> list[str]:
        fields = [
            ("Name", profile.display_name or profile.name),
            ("Email", profile.email),
        ]
        return [f"[cyan]{label}:[/cyan] {value}" for label, value in fields if value]

    def status(self, message: str):
        """Return a status context manager for long operations."""
        return self._console.status(message)


# Module-level default instance for convenience
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
