"""Parsers for ping and traceroute text output.

Both Windows and POSIX tool output is accepted by the same functions, so the
parsers do not need to know which platform produced the text. They are pure:
the same input always yields the same result, and unrecognised text yields
``None`` (or an empty trace) instead of raising.
"""

import re
from collections.abc import Iterator

from ..models import TraceResult

# Windows summary: "Minimum = 5ms, Maximum = 7ms, Average = 6ms"
AVERAGE_PATTERN = re.compile(r"Average\s*=\s*(\d+(?:\.\d+)?)\s*ms", re.IGNORECASE)

# Linux/BSD summary: "rtt min/avg/max/mdev = 1.0/2.0/3.0/0.5 ms"
SUMMARY_PATTERN = re.compile(r"=\s*\d+(?:\.\d+)?/(\d+(?:\.\d+)?)/\d+(?:\.\d+)?")

# Single reply: "time=6.5 ms", "time=6ms", "time<1ms"
REPLY_TIME_PATTERN = re.compile(r"time[=<]\s*(\d+(?:\.\d+)?)\s*ms", re.IGNORECASE)

HOP_LINE_PATTERN = re.compile(r"^\s*\d+\s")
HOP_RTT_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*ms\b", re.IGNORECASE)

LATENCY_PATTERNS = (AVERAGE_PATTERN, SUMMARY_PATTERN, REPLY_TIME_PATTERN)


def parse_ping_output(output: str | None) -> float | None:
    """Extract the average round-trip time from ping output.

    Patterns are tried in order: aggregate "Average = N ms", the
    min/avg/max summary line, then a single reply's ``time=`` field.

    Args:
        output: Raw ping stdout

    Returns:
        Average RTT in milliseconds, or None if no pattern matched
    """
    if not output:
        return None

    for pattern in LATENCY_PATTERNS:
        match = pattern.search(output)
        if match:
            return float(match.group(1))

    return None


def iter_hop_lines(output: str | None) -> Iterator[str]:
    """Yield the lines of traceroute output that start with a hop index."""
    if not output:
        return

    for line in output.splitlines():
        if HOP_LINE_PATTERN.match(line):
            yield line.strip()


def parse_hop_rtt(line: str) -> float | None:
    """Return the last millisecond value on a hop line."""
    values = HOP_RTT_PATTERN.findall(line)
    if not values:
        return None
    return float(values[-1])


def parse_traceroute_output(output: str | None) -> TraceResult:
    """Count hops and extract the final hop's RTT.

    Args:
        output: Raw traceroute/tracert stdout

    Returns:
        TraceResult; hop_count 0 and last_hop_rtt None when no hops were found
    """
    hop_lines = list(iter_hop_lines(output))
    if not hop_lines:
        return TraceResult()

    return TraceResult(hop_count=len(hop_lines), last_hop_rtt=parse_hop_rtt(hop_lines[-1]))
