"""Pre-flight inspection of a tunnel's remote endpoint."""

import re
from pathlib import Path

from pydantic import ValidationError

from ..common.exceptions import CommandError, ConfigParseError
from ..common.logging import get_logger
from ..common.process import CommandRunner
from ..config import BenchConfig
from ..models import TunnelEndpoint
from ..platform import PlatformAdapter
from ..probe.runner import ProbeRunner

logger = get_logger(__name__)

# "Endpoint = 203.0.113.7:51820" or "Endpoint = [2001:db8::1]:51820"
ENDPOINT_PATTERN = re.compile(
    r"^\s*Endpoint\s*=\s*(?:\[(?P<ipv6>[^\]\s]+)\]|(?P<host>[^:\s\[\]]+)):(?P<port>\d+)",
    re.IGNORECASE | re.MULTILINE,
)


def parse_endpoint(content: str) -> TunnelEndpoint | None:
    """Extract the first endpoint declaration from tunnel config text.

    Args:
        content: Tunnel configuration file content

    Returns:
        TunnelEndpoint, or None if no well-formed declaration was found
    """
    match = ENDPOINT_PATTERN.search(content or "")
    if not match:
        return None

    try:
        return TunnelEndpoint(
            host=match.group("ipv6") or match.group("host"),
            port=int(match.group("port")),
        )
    except ValidationError:
        return None


def read_endpoint(config_path: Path) -> TunnelEndpoint:
    """Read a tunnel config file and parse its endpoint.

    Raises:
        ConfigParseError: If the file is unreadable or has no valid endpoint
    """
    try:
        content = Path(config_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Failed to read config {config_path}: {e}") from e

    endpoint = parse_endpoint(content)
    if endpoint is None:
        raise ConfigParseError(f"No valid Endpoint line in {config_path}")
    return endpoint


class EndpointInspector:
    """Reports where a tunnel connects to, before the tunnel is started.

    Purely informational: nothing here affects scoring, and every failure is
    reported as a log message instead of an exception.
    """

    def __init__(
        self,
        adapter: PlatformAdapter,
        probe_runner: ProbeRunner,
        runner: CommandRunner | None = None,
        config: BenchConfig | None = None,
    ):
        self.adapter = adapter
        self.probe_runner = probe_runner
        self.runner = runner or probe_runner.runner
        self.config = config or probe_runner.config

    async def resolve_hostname(self, address: str) -> str | None:
        """Reverse-resolve an address, returning None when unresolved."""
        argv = self.adapter.resolve_command(address)
        try:
            result = await self.runner.run(argv, timeout=self.config.resolve_timeout)
        except CommandError as e:
            logger.debug("Reverse lookup failed", address=address, error=str(e))
            return None

        if not result.ok or not result.stdout:
            return None
        return self.adapter.parse_hostname(result.stdout)

    async def inspect(self, config_path: Path) -> None:
        """Log the endpoint address, its reverse name and its latency."""
        logger.info("Checking tunnel endpoint", config=str(config_path))

        try:
            endpoint = read_endpoint(config_path)
        except ConfigParseError as e:
            logger.warning("Could not parse endpoint from config", error=str(e))
            return

        logger.info("Endpoint found", endpoint=str(endpoint))

        hostname = await self.resolve_hostname(endpoint.host)
        logger.info("Endpoint hostname", hostname=hostname or "(not resolved)")

        latency = await self.probe_runner.ping_once(
            endpoint.host, timeout=self.config.endpoint_ping_timeout
        )
        if latency is None:
            logger.info("Endpoint ping", result="no response")
        else:
            logger.info("Endpoint ping", latency_ms=latency)
