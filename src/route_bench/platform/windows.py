"""Windows commands: ping, tracert, the WireGuard service manager, nslookup."""

import re
from pathlib import Path

from ..common.exceptions import CommandError
from ..common.logging import get_logger
from ..common.process import CommandRunner
from .base import PlatformAdapter

logger = get_logger(__name__)

# The resolver itself is reported on "Server:", so the first "Name:" is the answer
NAME_PATTERN = re.compile(r"^Name:\s+(\S+)", re.MULTILINE | re.IGNORECASE)


class WindowsAdapter(PlatformAdapter):
    """Adapter for Windows using the WireGuard tunnel service."""

    name = "windows"

    def ping_command(self, target: str, count: int) -> list[str]:
        return ["ping", "-n", str(count), target]

    def trace_command(self, target: str, wait: float) -> list[str]:
        return ["tracert", "-d", "-w", str(int(wait * 1000)), target]

    def tunnel_up_command(self, config_path: Path, name: str) -> list[str]:
        return ["wireguard", "/installtunnelservice", str(config_path.absolute())]

    def tunnel_down_command(self, name: str, config_path: Path | None = None) -> list[str]:
        # The service is registered under the config file's stem
        return ["wireguard", "/uninstalltunnelservice", name]

    def resolve_command(self, address: str) -> list[str]:
        return ["nslookup", address]

    def parse_hostname(self, output: str) -> str | None:
        match = NAME_PATTERN.search(output or "")
        return match.group(1).rstrip(".") if match else None

    async def is_privileged(self, runner: CommandRunner, timeout: float) -> bool:
        try:
            result = await runner.run(["net", "session"], timeout=timeout)
        except CommandError as e:
            logger.debug("Privilege check failed", error=str(e))
            return False
        return result.ok
