"""Latency and path-trace probes against a target host."""

import asyncio

from ..common.exceptions import CommandError, CommandTimeoutError
from ..common.logging import get_logger
from ..common.process import CommandResult, CommandRunner
from ..config import BenchConfig
from ..platform import PlatformAdapter
from ..models import TraceResult
from .parsers import iter_hop_lines

logger = get_logger(__name__)


class ProbeRunner:
    """Runs ping and traceroute through the platform adapter.

    Probe failures never raise: a timeout, a missing binary or output that
    matches no known format all degrade to a null metric.
    """

    def __init__(
        self,
        adapter: PlatformAdapter,
        runner: CommandRunner | None = None,
        config: BenchConfig | None = None,
    ):
        self.adapter = adapter
        self.runner = runner or CommandRunner()
        self.config = config or BenchConfig()

    async def _execute(self, argv: list[str], timeout: float) -> CommandResult | None:
        """Run a probe command, mapping execution failures to None."""
        try:
            return await self.runner.run(argv, timeout=timeout)
        except CommandError as e:
            logger.warning("Probe command failed", command=argv[0], error=str(e))
            return None

    async def ping_once(self, target: str, timeout: float | None = None) -> float | None:
        """Run a single latency probe without retries.

        Args:
            target: Host or IP to probe
            timeout: Override for the configured ping timeout

        Returns:
            Average RTT in ms, or None if the probe errored or was unparseable
        """
        argv = self.adapter.ping_command(target, self.config.ping_count)
        result = await self._execute(argv, timeout or self.config.ping_timeout)
        if result is None or not result.ok:
            return None
        return self.adapter.parse_latency(result.stdout)

    async def measure_latency(self, target: str) -> float | None:
        """Measure average latency to target, retrying on failure.

        Args:
            target: Host or IP to probe

        Returns:
            Average RTT in ms from the first successful attempt, or None
        """
        retries = self.config.ping_retries
        for attempt in range(1, retries + 1):
            logger.info("Pinging target", target=target, attempt=attempt, retries=retries)

            latency = await self.ping_once(target)
            if latency is not None:
                logger.info("Latency measured", target=target, latency_ms=latency)
                return latency

            if attempt < retries:
                await asyncio.sleep(self.config.ping_retry_delay)

        logger.warning("No ping response after all retries", target=target, retries=retries)
        return None

    async def trace_path(self, target: str) -> TraceResult:
        """Trace the path to target once.

        Args:
            target: Host or IP to trace

        Returns:
            TraceResult with the hops printed before any failure or timeout;
            hop_count 0 and last_hop_rtt None when none were printed
        """
        logger.info("Tracing path", target=target)
        argv = self.adapter.trace_command(target, self.config.trace_wait)
        try:
            result = await self.runner.run(argv, timeout=self.config.trace_timeout)
        except CommandTimeoutError as e:
            logger.warning("Trace timed out", target=target, timeout=e.timeout)
            output, ok = e.stdout, False
        except CommandError as e:
            logger.warning("Probe command failed", command=argv[0], error=str(e))
            return TraceResult()
        else:
            output, ok = result.stdout, result.ok

        trace = self.adapter.parse_trace(output)
        for line in iter_hop_lines(output):
            logger.info("Hop", target=target, line=line)

        if not ok or not trace.complete:
            logger.warning("Trace incomplete or timed out", target=target, hops=trace.hop_count)
            # A failed or killed trace still reports whatever hops it printed
            return trace

        logger.info(
            "Trace finished",
            target=target,
            hops=trace.hop_count,
            last_hop_rtt_ms=trace.last_hop_rtt,
        )
        return trace
