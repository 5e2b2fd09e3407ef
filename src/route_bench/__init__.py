"""Route benchmark - find the lowest-latency path to a host across WireGuard tunnels."""

from .common.exceptions import (
    BinaryNotFoundError,
    CommandError,
    CommandTimeoutError,
    ConfigParseError,
    ConfigurationError,
    RouteBenchError,
    TunnelBusyError,
    TunnelError,
    TunnelStartError,
    TunnelStopError,
)
from .common.logging import get_logger, setup_logging
from .common.process import CommandResult, CommandRunner
from .config import BenchConfig
from .discovery import discover_routes
from .models import (
    ProbeResult,
    RouteDefinition,
    TraceResult,
    TunnelEndpoint,
    TunnelSession,
)
from .orchestrator import RouteOrchestrator
from .platform import PlatformAdapter, PosixAdapter, WindowsAdapter, detect_platform
from .probe.parsers import parse_ping_output, parse_traceroute_output
from .probe.runner import ProbeRunner
from .selector import select_best_route
from .tunnel import EndpointInspector, TunnelController, parse_endpoint, read_endpoint

__version__ = "0.1.0"


__all__ = [
    # Orchestration
    "RouteOrchestrator",
    "select_best_route",
    "discover_routes",
    "BenchConfig",
    # Components
    "ProbeRunner",
    "TunnelController",
    "EndpointInspector",
    "CommandRunner",
    "CommandResult",
    # Platforms
    "PlatformAdapter",
    "PosixAdapter",
    "WindowsAdapter",
    "detect_platform",
    # Models
    "RouteDefinition",
    "ProbeResult",
    "TraceResult",
    "TunnelEndpoint",
    "TunnelSession",
    # Parsing
    "parse_ping_output",
    "parse_traceroute_output",
    "parse_endpoint",
    "read_endpoint",
    # Exceptions
    "RouteBenchError",
    "ConfigurationError",
    "ConfigParseError",
    "CommandError",
    "BinaryNotFoundError",
    "CommandTimeoutError",
    "TunnelError",
    "TunnelStartError",
    "TunnelStopError",
    "TunnelBusyError",
    # Logging
    "get_logger",
    "setup_logging",
]
