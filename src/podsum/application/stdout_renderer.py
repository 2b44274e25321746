"""Render a pod health summary to the terminal using rich."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from podsum.domain.pod_totals import PodTotals

_CATEGORY_STYLES: dict[str, str] = {
    "ready": "green",
    "running_not_ready": "yellow",
    "pending": "yellow",
    "unscheduled": "red",
    "uninitialized": "red",
    "containers_not_ready": "red",
}


def _build_totals_table(totals: PodTotals) -> Table:
    table = Table(title="Pod Totals", box=box.SIMPLE_HEAVY, expand=False)
    table.add_column("category", justify="left")
    table.add_column("pods", justify="right")
    for category, count in totals.as_dict().items():
        style = _CATEGORY_STYLES.get(category, "") if count else "dim"
        table.add_row(category, str(count), style=style)
    return table


def render_stdout_report(
    *,
    title: str,
    captured_stdout: str,
    totals: PodTotals,
    console: Console | None = None,
) -> None:
    """Render execution log and totals table."""
    console = console or Console()
    console.print(f"[bold cyan]{title}[/bold cyan]")

    if captured_stdout.strip():
        console.print(
            Panel(
                Text(captured_stdout.strip()),
                title="Execution Log",
                border_style="blue",
            )
        )

    console.print(_build_totals_table(totals))
