"""Sequential evaluation of the direct route and each tunnel route."""

from collections.abc import Sequence
from pathlib import Path

from .common.exceptions import ConfigurationError, TunnelBusyError
from .common.logging import get_logger
from .common.process import CommandRunner
from .common.utils import validate_non_empty_string
from .config import BenchConfig
from .models import ProbeResult, RouteDefinition
from .platform import PlatformAdapter, detect_platform
from .probe.runner import ProbeRunner
from .tunnel.controller import TunnelController
from .tunnel.endpoint import EndpointInspector

logger = get_logger(__name__)


class RouteOrchestrator:
    """Evaluates routes one at a time and returns one result per route.

    Tunnel routes are probed inside ``TunnelController.session`` so the tunnel
    is torn down before the next route starts, whatever happened while it was
    up. A failure on one route is recorded as an all-null result and never
    aborts the run.
    """

    def __init__(
        self,
        adapter: PlatformAdapter | None = None,
        config: BenchConfig | None = None,
        runner: CommandRunner | None = None,
        probe_runner: ProbeRunner | None = None,
        tunnel_controller: TunnelController | None = None,
        endpoint_inspector: EndpointInspector | None = None,
    ):
        self.adapter = adapter or detect_platform()
        self.config = config or BenchConfig()
        self.runner = runner or CommandRunner()
        self.probe_runner = probe_runner or ProbeRunner(
            self.adapter, self.runner, self.config
        )
        self.tunnel_controller = tunnel_controller or TunnelController(
            self.adapter, self.runner, self.config
        )
        self.endpoint_inspector = endpoint_inspector or EndpointInspector(
            self.adapter, self.probe_runner, self.runner, self.config
        )

    @staticmethod
    def _validate_routes(routes: Sequence[RouteDefinition]) -> None:
        """Reject route lists whose names would make results ambiguous."""
        seen: set[str] = set()
        for route in routes:
            if route.name in seen:
                raise ConfigurationError(f"Duplicate route name: {route.name}")
            seen.add(route.name)

    async def evaluate(
        self, target: str, routes: Sequence[RouteDefinition]
    ) -> list[ProbeResult]:
        """Evaluate every route against target, in order.

        Args:
            target: Host or IP to benchmark
            routes: Routes to evaluate, direct route conventionally first

        Returns:
            One ProbeResult per route, in the same order as ``routes``

        Raises:
            ConfigurationError: If the target is empty or route names repeat
        """
        try:
            target = validate_non_empty_string(target, "Target")
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self._validate_routes(routes)

        logger.info("Evaluating routes", target=target, routes=len(routes))
        results: list[ProbeResult] = []
        for index, route in enumerate(routes, start=1):
            logger.info("Testing route", route=route.name, position=index, total=len(routes))
            results.append(await self.evaluate_route(target, route))

        return results

    async def evaluate_route(self, target: str, route: RouteDefinition) -> ProbeResult:
        """Evaluate a single route.

        Raises:
            TunnelBusyError: If a previous tunnel is still held by the controller
        """
        try:
            if route.config_path is None:
                return await self._probe(target, route.name)

            await self._inspect_endpoint(route.name, route.config_path)

            async with self.tunnel_controller.session(route.config_path, route.name) as session:
                if session is None:
                    return ProbeResult.unreachable(route.name)
                return await self._probe(target, route.name)
        except TunnelBusyError:
            raise
        except Exception:
            logger.exception("Route evaluation failed", route=route.name)
            return ProbeResult.unreachable(route.name)

    async def _inspect_endpoint(self, route_name: str, config_path: Path) -> None:
        """Run the informational endpoint check; it never blocks probing."""
        try:
            await self.endpoint_inspector.inspect(config_path)
        except Exception as e:
            logger.warning("Endpoint check failed", route=route_name, error=str(e))

    async def _probe(self, target: str, route_name: str) -> ProbeResult:
        """Measure latency, then trace the path, regardless of either outcome."""
        avg_latency = await self.probe_runner.measure_latency(target)
        trace = await self.probe_runner.trace_path(target)
        return ProbeResult.from_probes(route_name, avg_latency, trace)
