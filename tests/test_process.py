"""Tests for CommandRunner."""

import sys
from unittest.mock import AsyncMock, Mock, patch

import pytest

from route_bench.common.exceptions import BinaryNotFoundError, CommandTimeoutError
from route_bench.common.process import CommandResult, CommandRunner


class TestCommandResult:
    def test_ok_reflects_exit_status(self):
        assert CommandResult(argv=["ping"], returncode=0).ok
        assert not CommandResult(argv=["ping"], returncode=1).ok


class TestCommandRunner:
    """Test command execution against a real Python child process."""

    @pytest.mark.asyncio
    async def test_captures_stdout(self):
        runner = CommandRunner()

        result = await runner.run([sys.executable, "-c", "print('hello')"], timeout=30.0)

        assert result.ok
        assert result.stdout.strip() == "hello"
        assert result.argv[0] == sys.executable

    @pytest.mark.asyncio
    async def test_non_zero_exit(self):
        runner = CommandRunner()

        result = await runner.run(
            [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"],
            timeout=30.0,
        )

        assert result.returncode == 3
        assert not result.ok
        assert result.stderr == "bad"

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self):
        runner = CommandRunner()

        with pytest.raises(CommandTimeoutError) as exc_info:
            await runner.run([sys.executable, "-c", "import time; time.sleep(30)"], timeout=0.5)

        assert exc_info.value.timeout == 0.5

    @pytest.mark.asyncio
    async def test_timeout_keeps_partial_output(self):
        """Lines printed before the kill are attached to the error"""
        script = (
            "import sys, time\n"
            "print(' 1  192.168.1.1  1.0 ms', flush=True)\n"
            "print(' 2  10.0.0.1  5.0 ms', flush=True)\n"
            "time.sleep(30)\n"
        )
        runner = CommandRunner()

        with pytest.raises(CommandTimeoutError) as exc_info:
            await runner.run([sys.executable, "-c", script], timeout=2.0)

        assert "192.168.1.1" in exc_info.value.stdout
        assert "10.0.0.1" in exc_info.value.stdout
        assert exc_info.value.stderr == ""

    @pytest.mark.asyncio
    async def test_missing_binary(self):
        runner = CommandRunner()

        with pytest.raises(BinaryNotFoundError, match="Cannot execute"):
            await runner.run(["/nonexistent/route-bench-binary"], timeout=5.0)

    @pytest.mark.asyncio
    async def test_empty_command(self):
        with pytest.raises(ValueError, match="Command cannot be empty"):
            await CommandRunner().run([], timeout=5.0)

    @pytest.mark.asyncio
    async def test_uses_exec_without_shell(self):
        process = Mock()
        process.stdout.read = AsyncMock(side_effect=[b"out", b""])
        process.stderr.read = AsyncMock(return_value=b"")
        process.wait = AsyncMock(return_value=0)
        process.returncode = 0

        with patch(
            "route_bench.common.process.asyncio.create_subprocess_exec",
            new=AsyncMock(return_value=process),
        ) as mock_exec:
            result = await CommandRunner().run(["ping", "-c", "4", "8.8.8.8"], timeout=5.0)

        assert result.stdout == "out"
        assert mock_exec.await_args.args == ("ping", "-c", "4", "8.8.8.8")
