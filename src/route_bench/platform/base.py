"""Platform adapter interface for probe, tunnel and lookup commands."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..common.process import CommandRunner
from ..probe.parsers import parse_ping_output, parse_traceroute_output
from ..models import TraceResult


class PlatformAdapter(ABC):
    """Builds platform-specific command lines and parses their output.

    One adapter is selected at startup and injected into the components that
    run commands, so no other code branches on the operating system.
    """

    name: str = "generic"

    @abstractmethod
    def ping_command(self, target: str, count: int) -> list[str]:
        """Command that sends ``count`` echo requests to ``target``."""
        raise NotImplementedError

    @abstractmethod
    def trace_command(self, target: str, wait: float) -> list[str]:
        """Command that traces the path to ``target`` without name lookups."""
        raise NotImplementedError

    @abstractmethod
    def tunnel_up_command(self, config_path: Path, name: str) -> list[str]:
        """Command that activates the tunnel defined in ``config_path``."""
        raise NotImplementedError

    @abstractmethod
    def tunnel_down_command(self, name: str, config_path: Path | None = None) -> list[str]:
        """Command that deactivates tunnel ``name``."""
        raise NotImplementedError

    @abstractmethod
    def resolve_command(self, address: str) -> list[str]:
        """Command that performs a reverse lookup of ``address``."""
        raise NotImplementedError

    @abstractmethod
    def parse_hostname(self, output: str) -> str | None:
        """Extract the canonical name from reverse lookup output."""
        raise NotImplementedError

    @abstractmethod
    async def is_privileged(self, runner: CommandRunner, timeout: float) -> bool:
        """Check whether the process may start and stop tunnels."""
        raise NotImplementedError

    def parse_latency(self, output: str) -> float | None:
        """Extract average latency in ms from ping output."""
        return parse_ping_output(output)

    def parse_trace(self, output: str) -> TraceResult:
        """Extract hop count and last-hop RTT from path trace output."""
        return parse_traceroute_output(output)
