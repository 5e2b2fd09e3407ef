"""Asynchronous execution of external commands."""

import asyncio
from dataclasses import dataclass, field

from .exceptions import BinaryNotFoundError, CommandTimeoutError
from .logging import get_logger

logger = get_logger(__name__)

READ_CHUNK_SIZE = 4096
# Seconds to wait for the pipes of a killed process to reach EOF
DRAIN_TIMEOUT = 1.0


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one finished command."""

    argv: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    duration: float = field(default=0.0, compare=False)

    @property
    def ok(self) -> bool:
        """True when the command exited with status 0."""
        return self.returncode == 0


class CommandRunner:
    """Runs external commands one at a time on the current event loop.

    Every command gets its own timeout. A command that outlives it is killed
    and reaped before ``CommandTimeoutError`` is raised, so no child process
    survives the call.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    async def run(self, argv: list[str], timeout: float) -> CommandResult:
        """Run a command and capture its output.

        Args:
            argv: Command and arguments, passed without a shell
            timeout: Seconds to wait for the command to finish

        Returns:
            CommandResult with decoded stdout/stderr and exit status

        Raises:
            BinaryNotFoundError: If the executable cannot be started
            CommandTimeoutError: If the command does not finish in time; the
                error carries the output printed before the kill
        """
        if not argv:
            raise ValueError("Command cannot be empty")

        logger.debug("Running command", argv=argv, timeout=timeout)
        loop = asyncio.get_running_loop()
        started = loop.time()
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (FileNotFoundError, PermissionError) as e:
            logger.error("Failed to start command", executable=argv[0], error=str(e))
            raise BinaryNotFoundError(f"Cannot execute {argv[0]}: {e}") from e

        stdout = bytearray()
        stderr = bytearray()
        try:
            await asyncio.wait_for(
                self._collect(process, stdout, stderr), timeout=timeout
            )
        except TimeoutError:
            logger.warning("Command timed out, killing", argv=argv, timeout=timeout)
            await self._kill(process)
            await self._drain(process, stdout, stderr)
            raise CommandTimeoutError(
                argv,
                timeout,
                stdout=stdout.decode(self.encoding, errors="replace"),
                stderr=stderr.decode(self.encoding, errors="replace"),
            ) from None

        result = CommandResult(
            argv=list(argv),
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode(self.encoding, errors="replace"),
            stderr=stderr.decode(self.encoding, errors="replace"),
            duration=loop.time() - started,
        )
        logger.debug(
            "Command finished",
            executable=argv[0],
            returncode=result.returncode,
            duration=round(result.duration, 3),
        )
        return result

    async def _kill(self, process: asyncio.subprocess.Process) -> None:
        """Kill a child process and wait for it to exit."""
        try:
            process.kill()
        except ProcessLookupError:
            return
        try:
            await asyncio.wait_for(process.wait(), timeout=5.0)
        except TimeoutError:
            logger.error("Failed to reap killed process", pid=process.pid)

    async def _collect(
        self, process: asyncio.subprocess.Process, stdout: bytearray, stderr: bytearray
    ) -> None:
        """Read both pipes to EOF, then reap the process.

        Output lands in the buffers as it arrives, so a cancelled collection
        keeps everything read so far.
        """
        await asyncio.gather(
            _read_stream(process.stdout, stdout),
            _read_stream(process.stderr, stderr),
        )
        await process.wait()

    async def _drain(
        self, process: asyncio.subprocess.Process, stdout: bytearray, stderr: bytearray
    ) -> None:
        """Pick up output still buffered in the pipes of a killed process."""
        try:
            await asyncio.wait_for(
                asyncio.gather(
                    _read_stream(process.stdout, stdout),
                    _read_stream(process.stderr, stderr),
                ),
                timeout=DRAIN_TIMEOUT,
            )
        except TimeoutError:
            logger.debug("Gave up reading output of killed process", pid=process.pid)


async def _read_stream(stream: asyncio.StreamReader | None, buffer: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)
