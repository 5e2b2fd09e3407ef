"""Platform-specific command construction and output parsing."""

import sys

from .base import PlatformAdapter
from .posix import PosixAdapter
from .windows import WindowsAdapter


def detect_platform(platform: str | None = None) -> PlatformAdapter:
    """Select the adapter for the running (or given) ``sys.platform``."""
    platform = platform or sys.platform
    if platform == "win32":
        return WindowsAdapter()
    return PosixAdapter()


__all__ = [
    "PlatformAdapter",
    "PosixAdapter",
    "WindowsAdapter",
    "detect_platform",
]
