from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from record_store.domain.models import Grouping, Record
from record_store.store import StoreSummary


def _format_number(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{value:,.2f}"


def _records_table(records: Sequence[Record], title: str, caption: Optional[str] = None) -> Table:
    table = Table(title=title, box=box.ROUNDED, caption=caption)
    table.add_column("ID", justify="right", style="magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="green")
    for record in records:
        table.add_row(str(record.id), record.name, _format_number(record.value))
    return table


def print_records(
    records: Sequence[Record], title: str = "Records", console: Optional[Console] = None
) -> None:
    """
    Render records as a rich table, in the order given.
    """
    console = console or Console()

    if not records:
        console.print("[yellow]No records to display.[/yellow]")
        return

    console.print(_records_table(records, title, caption=f"{len(records)} record(s)"))


def print_groups(
    groups: Grouping, title: str = "Records by Name", console: Optional[Console] = None
) -> None:
    """
    Render a grouping as one summary table plus one table per group.

    The summary lists each name with its record count and value total.
    """
    console = console or Console()

    if not groups:
        console.print("[yellow]No groups to display.[/yellow]")
        return

    overview = Table(title=title, box=box.ROUNDED, caption="Groups in first-seen order")
    overview.add_column("Name", style="cyan", no_wrap=True)
    overview.add_column("Records", justify="right", style="magenta")
    overview.add_column("Total Value", justify="right", style="bold green")
    for name, members in groups.items():
        overview.add_row(name, str(len(members)), _format_number(sum(r.value for r in members)))
    console.print(overview)

    for name, members in groups.items():
        console.print(_records_table(members, title=f"[cyan]{name}[/cyan]"))


def print_summary(
    summary: StoreSummary, title: str = "Record Statistics", console: Optional[Console] = None
) -> None:
    """
    Render count, average, minimum and maximum as a two-column table.
    """
    console = console or Console()

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right", style="bold green")
    table.add_row("Records", f"{summary.count:,}")
    table.add_row("Average", _format_number(summary.average))
    table.add_row("Minimum", _format_number(summary.minimum))
    table.add_row("Maximum", _format_number(summary.maximum))

    console.print(table)
    if summary.count == 0:
        console.print("[yellow]Store is empty; minimum and maximum are undefined.[/yellow]")
