from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from hockey_pool.models.standings import PoolResult
from hockey_pool.storage.csv_sink import NO_DATA_MESSAGE


def build_table(result: PoolResult, top_k: int) -> Table:
    """Rich table of the standings; the top-K entity columns are highlighted."""
    table = Table(title=f"{result.kind.value.capitalize()} Pool Standings", header_style="bold")
    for index, heading in enumerate(result.table.header):
        style = "green" if 2 <= index < 2 + top_k else None
        justify = "right" if index == 1 else "left"
        table.add_column(heading, style=style, justify=justify)
    for row in result.table.rows:
        table.add_row(*(str(cell) for cell in row))
    return table


def render_result(result: PoolResult, top_k: int, console: Optional[Console] = None) -> None:
    console = console or Console()
    if not result.has_data:
        console.print(Panel(NO_DATA_MESSAGE, title=result.kind.value.capitalize()))
    else:
        console.print(build_table(result, top_k))

    if result.unmatched:
        lines = "\n".join(
            f"- {record.participant}: {record.original_name}" for record in result.unmatched
        )
        console.print(Panel(lines, title=f"{len(result.unmatched)} unmatched", style="yellow"))
