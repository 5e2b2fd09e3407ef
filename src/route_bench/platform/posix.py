"""Linux and macOS commands: ping, traceroute, wg-quick, host."""

import os
import re
from pathlib import Path

from ..common.process import CommandRunner
from .base import PlatformAdapter

# "79.127.186.165.in-addr.arpa domain name pointer host.example.com."
POINTER_PATTERN = re.compile(r"pointer\s+(\S+?)\.?\s*$", re.MULTILINE)


class PosixAdapter(PlatformAdapter):
    """Adapter for POSIX systems using wg-quick."""

    name = "posix"

    def ping_command(self, target: str, count: int) -> list[str]:
        return ["ping", "-c", str(count), target]

    def trace_command(self, target: str, wait: float) -> list[str]:
        return ["traceroute", "-n", "-w", f"{wait:g}", target]

    def tunnel_up_command(self, config_path: Path, name: str) -> list[str]:
        return ["wg-quick", "up", str(config_path)]

    def tunnel_down_command(self, name: str, config_path: Path | None = None) -> list[str]:
        # wg-quick resolves a bare name only under /etc/wireguard
        return ["wg-quick", "down", str(config_path) if config_path else name]

    def resolve_command(self, address: str) -> list[str]:
        return ["host", address]

    def parse_hostname(self, output: str) -> str | None:
        match = POINTER_PATTERN.search(output or "")
        return match.group(1) if match else None

    async def is_privileged(self, runner: CommandRunner, timeout: float) -> bool:
        return os.geteuid() == 0
