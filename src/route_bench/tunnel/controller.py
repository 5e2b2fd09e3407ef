"""Tunnel lifecycle management with guaranteed teardown."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from ..common.exceptions import (
    CommandError,
    TunnelBusyError,
    TunnelStartError,
    TunnelStopError,
)
from ..common.logging import get_logger
from ..common.process import CommandRunner
from ..config import BenchConfig
from ..models import TunnelSession
from ..platform import PlatformAdapter

logger = get_logger(__name__)


class TunnelController:
    """Starts and stops the single tunnel that may be active at a time.

    All routes share one network interface, so the controller holds at most
    one TunnelSession. Starting a second tunnel while one is active raises
    TunnelBusyError.
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
        self._session: TunnelSession | None = None

    @property
    def active_session(self) -> TunnelSession | None:
        """The currently active tunnel, if any."""
        return self._session

    def is_active(self) -> bool:
        """Check if a tunnel is currently up."""
        return self._session is not None

    async def _activate(self, config_path: Path, name: str) -> None:
        """Run the platform activation command.

        Raises:
            TunnelStartError: If the command could not run or exited non-zero
        """
        argv = self.adapter.tunnel_up_command(config_path, name)
        try:
            result = await self.runner.run(argv, timeout=self.config.tunnel_timeout)
        except CommandError as e:
            raise TunnelStartError(f"Failed to start tunnel {name}: {e}") from e

        if not result.ok:
            detail = result.stderr.strip() or result.stdout.strip()
            raise TunnelStartError(
                f"Failed to start tunnel {name} (exit {result.returncode}): {detail}"
            )

    async def _deactivate(self, name: str, config_path: Path | None) -> None:
        """Run the platform deactivation command.

        Raises:
            TunnelStopError: If the command could not run or exited non-zero
        """
        argv = self.adapter.tunnel_down_command(name, config_path)
        try:
            result = await self.runner.run(argv, timeout=self.config.tunnel_timeout)
        except CommandError as e:
            raise TunnelStopError(f"Failed to stop tunnel {name}: {e}") from e

        if not result.ok:
            detail = result.stderr.strip() or result.stdout.strip()
            raise TunnelStopError(
                f"Failed to stop tunnel {name} (exit {result.returncode}): {detail}"
            )

    async def start(self, config_path: Path, name: str) -> bool:
        """Activate a tunnel and wait for routing to settle.

        Args:
            config_path: Tunnel configuration file
            name: Tunnel name

        Returns:
            True if the tunnel is active, False if activation failed

        Raises:
            TunnelBusyError: If another tunnel is still active
        """
        if self._session is not None:
            raise TunnelBusyError(
                f"Cannot start tunnel {name}: tunnel {self._session.name} is still active"
            )

        logger.info("Starting tunnel", tunnel=name, config=str(config_path))
        try:
            await self._activate(config_path, name)
        except TunnelStartError as e:
            logger.error("Failed to start tunnel", tunnel=name, error=str(e))
            return False

        self._session = TunnelSession(name=name, config_path=Path(config_path))

        delay = self.config.stabilization_delay
        logger.info("Waiting for tunnel to stabilize", tunnel=name, seconds=delay)
        try:
            await asyncio.sleep(delay)
        except BaseException:
            # Interrupted before start() could report success to the caller
            await self.stop(name)
            raise

        return True

    async def stop(self, name: str) -> None:
        """Deactivate a tunnel. Failures are logged, never raised.

        Safe to call when the tunnel is already down.
        """
        session = self._session
        config_path = None
        if session is not None and session.name == name:
            config_path = session.config_path
        elif session is not None:
            logger.warning("Stopping tunnel that is not the active session", tunnel=name, active=session.name)

        logger.info("Stopping tunnel", tunnel=name)
        try:
            await self._deactivate(name, config_path)
        except TunnelStopError as e:
            # The interface may stay up and affect the routes tested after it
            logger.error("Failed to stop tunnel", tunnel=name, error=str(e))
        else:
            logger.info("Tunnel stopped", tunnel=name)
        finally:
            if session is not None and session.name == name:
                self._session = None

    @asynccontextmanager
    async def session(self, config_path: Path, name: str) -> AsyncIterator[TunnelSession | None]:
        """Hold a tunnel for the duration of the block.

        Yields the active TunnelSession, or None if the tunnel failed to start.
        Teardown runs on every exit path once the start has succeeded.
        """
        if not await self.start(config_path, name):
            yield None
            return

        # start() reported success, so the block always gets a session
        session = self._session or TunnelSession(name=name, config_path=Path(config_path))
        try:
            yield session
        finally:
            await self.stop(name)
