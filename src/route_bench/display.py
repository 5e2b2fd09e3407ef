"""Rendering of the results table."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .common.utils import PLACEHOLDER, format_metric
from .models import ProbeResult

BEST_MARKER = "✓"


def build_results_table(results: Sequence[ProbeResult], best: ProbeResult | None) -> Table:
    """Build a table with one row per route, marking the winner."""
    table = Table(title="Route benchmark")
    table.add_column("Route", style="bold")
    table.add_column("Ping (ms)", justify="right")
    table.add_column("Hops", justify="right")
    table.add_column("Last RTT", justify="right")
    table.add_column("Best", justify="center")

    for result in results:
        is_best = best is not None and result.route == best.route
        table.add_row(
            Text(result.route),
            format_metric(result.avg_latency),
            # An incomplete trace reports zero hops
            format_metric(result.hop_count) if result.hop_count else PLACEHOLDER,
            format_metric(result.last_hop_rtt),
            BEST_MARKER if is_best else "",
            style="green" if is_best else None,
        )

    return table


def render_results(
    results: Sequence[ProbeResult],
    best: ProbeResult | None,
    console: Console | None = None,
) -> None:
    """Print the results table and the best route's name."""
    console = console or Console()
    console.print()
    console.print(build_results_table(results, best))
    console.print(f"Best route: {best.route if best else 'N/A'}", markup=False)
