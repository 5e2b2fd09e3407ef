"""Selection of the fastest route from probe results."""

from collections.abc import Iterable

from .models import ProbeResult


def select_best_route(results: Iterable[ProbeResult]) -> ProbeResult | None:
    """Return the result with the lowest average latency.

    Results without a latency are ignored. Ties go to the earliest result,
    which is the route evaluated first.

    Args:
        results: Probe results in evaluation order

    Returns:
        Winning ProbeResult, or None if no route produced a latency
    """
    best: ProbeResult | None = None
    best_latency = 0.0
    for result in results:
        latency = result.avg_latency
        if latency is None:
            continue
        if best is None or latency < best_latency:
            best, best_latency = result, latency
    return best
