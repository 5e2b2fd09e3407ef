"""Tests for results table rendering."""

from io import StringIO

from rich.console import Console

from route_bench.display import build_results_table, render_results
from route_bench.models import ProbeResult


def render_to_text(results, best):
    console = Console(file=StringIO(), width=100, color_system=None)
    render_results(results, best, console)
    return console.file.getvalue()


class TestRenderResults:
    def test_rows_and_best_marker(self):
        results = [
            ProbeResult(route="NON-VPN", avg_latency=38.0, hop_count=12, last_hop_rtt=37.5),
            ProbeResult(route="wg-fra", avg_latency=29.04, hop_count=9, last_hop_rtt=28.0),
        ]

        output = render_to_text(results, results[1])

        assert "NON-VPN" in output
        assert "38.0" in output
        assert "29.0" in output
        assert "✓" in output
        assert output.rstrip().endswith("Best route: wg-fra")

    def test_unreachable_route_shows_placeholders(self):
        results = [ProbeResult.unreachable("wg-broken")]

        output = render_to_text(results, None)

        row = next(line for line in output.splitlines() if "wg-broken" in line)
        assert row.count("-") >= 3
        assert "Best route: N/A" in output

    def test_zero_hops_render_as_placeholder(self):
        table = build_results_table([ProbeResult(route="A", avg_latency=5.0, hop_count=0)], None)
        hops_column = table.columns[2]
        assert list(hops_column.cells) == ["-"]

    def test_route_names_are_not_markup(self):
        results = [ProbeResult(route="[bold]wg", avg_latency=5.0)]

        output = render_to_text(results, results[0])

        assert "[bold]wg" in output
