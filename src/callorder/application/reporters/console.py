"""Console reporter: CallOrderVerifier state → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from callorder.application.verifier import CallOrderVerifier
    from callorder.domain.model.method_call import CallOrder, MethodCall


@dataclass(frozen=True, slots=True)
class ReportConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters (must be > 0).
        force_terminal: Emit ANSI styles even when not writing to a terminal.
        max_calls: Max recorded calls to display. None = all.
    """

    width: int = 120
    force_terminal: bool = False
    max_calls: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")
        if self.max_calls is not None and self.max_calls < 0:
            raise ValueError(f"max_calls must be >= 0, got {self.max_calls}")


class CallOrderReporter:
    """Renders recorded calls and declared orders of a verifier.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ReportConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ReportConfig()

    def report(self, verifier: CallOrderVerifier) -> str:
        """Format verifier history and expected orders.

        Args:
            verifier: Verifier to describe.

        Returns:
            Formatted string.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        history = verifier.history
        expected = verifier.expected_order

        self._render_header(console, len(history), len(expected))
        self._render_history(console, history)
        self._render_expected(console, expected)

        return output.getvalue()

    def _render_header(self, console: Console, calls: int, orders: int) -> None:
        console.rule("[bold]CALL ORDER[/bold]")
        console.print(f"[bold]Recorded calls:[/bold] {calls}  [bold]Expected orders:[/bold] {orders}")
        console.print()

    def _render_history(self, console: Console, history: tuple[MethodCall, ...]) -> None:
        if not history:
            console.print("[dim]No calls recorded.[/dim]")
            console.print()
            return

        shown = history
        if self._config.max_calls is not None:
            shown = history[: self._config.max_calls]

        table = Table(title="Recorded calls", title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("Call")
        table.add_column("Token id", justify="right")

        for position, call in enumerate(shown, start=1):
            table.add_row(str(position), escape(call.display_name), str(call.token.id))

        console.print(table)
        hidden = len(history) - len(shown)
        if hidden:
            console.print(f"[dim]... {hidden} more call(s) not shown[/dim]")
        console.print()

    def _render_expected(self, console: Console, expected: tuple[CallOrder, ...]) -> None:
        if not expected:
            console.print("[dim]No call orders declared.[/dim]")
            return

        console.print("[bold]Expected orders[/bold]")
        for number, order in enumerate(expected, start=1):
            console.print(f"  #{number}  {escape(str(order))}")
