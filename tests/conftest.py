"""Shared pytest fixtures for route benchmark tests."""

from unittest.mock import AsyncMock, Mock

import pytest

from route_bench.common.process import CommandResult
from route_bench.config import BenchConfig
from route_bench.platform import PosixAdapter, WindowsAdapter

from samples import WIREGUARD_CONFIG


@pytest.fixture
def fast_config():
    """Config with all waits disabled so tests never sleep."""
    return BenchConfig(ping_retry_delay=0.0, stabilization_delay=0.0)


@pytest.fixture
def posix_adapter():
    return PosixAdapter()


@pytest.fixture
def windows_adapter():
    return WindowsAdapter()


@pytest.fixture
def make_result():
    """Factory for CommandResult objects.

    Returns:
        Callable: make_result(stdout="", returncode=0, stderr="", argv=None)
    """

    def _make(stdout="", returncode=0, stderr="", argv=None):
        return CommandResult(
            argv=argv or ["cmd"],
            returncode=returncode,
            stdout=stdout,
            stderr=stderr,
        )

    return _make


@pytest.fixture
def mock_runner():
    """CommandRunner double whose run() is an AsyncMock."""
    runner = Mock()
    runner.run = AsyncMock()
    return runner


@pytest.fixture
def tunnel_config(tmp_path):
    """Write a WireGuard config with a parseable endpoint.

    Returns:
        Path: Path to the config file
    """
    config_path = tmp_path / "wg-fra.conf"
    config_path.write_text(WIREGUARD_CONFIG)
    return config_path
