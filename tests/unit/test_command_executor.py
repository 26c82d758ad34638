import asyncio

import pytest
from unittest.mock import AsyncMock, Mock, patch

from zpool_summary.infrastructure.command_executor import CommandExecutor, TIMEOUT_EXIT_CODE


def make_process(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0):
    process = Mock()
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.wait = AsyncMock(return_value=returncode)
    process.kill = Mock()
    process.returncode = returncode
    return process


class TestCommandExecutor:
    """Test suite for CommandExecutor."""

    @pytest.fixture
    def executor(self):
        return CommandExecutor(timeout=5)

    @pytest.mark.asyncio
    async def test_disallowed_command_is_not_spawned(self, executor):
        with patch("asyncio.create_subprocess_exec", new=AsyncMock()) as spawn:
            result = await executor.execute_system("rm", "-rf", "/")

        assert not result.success
        assert "not allowed" in result.stderr
        spawn.assert_not_called()

    @pytest.mark.asyncio
    async def test_success(self, executor):
        process = make_process(stdout=b"zroot\tavailable\t1\n", stderr=b"")

        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)) as spawn:
            result = await executor.execute_system("zfs", "get", "-Hp", "available")

        assert result.success
        assert result.returncode == 0
        assert result.stdout == "zroot\tavailable\t1"
        assert spawn.call_args[0] == ("zfs", "get", "-Hp", "available")

    @pytest.mark.asyncio
    async def test_non_zero_exit(self, executor):
        process = make_process(stderr=b"no such pool\n", returncode=1)

        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)):
            result = await executor.execute_system("zpool", "status")

        assert not result.success
        assert result.returncode == 1
        assert result.stderr == "no such pool"

    @pytest.mark.asyncio
    async def test_failures_are_left_to_the_caller_to_report(self, executor):
        process = make_process(stderr=b"no such pool\n", returncode=1)
        executor.logger = Mock()

        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)):
            await executor.execute_system("zpool", "status")

        executor.logger.warning.assert_not_called()
        executor.logger.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self, executor):
        process = make_process()
        process.communicate = AsyncMock(side_effect=asyncio.TimeoutError)

        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)):
            result = await executor.execute_system("zpool", "status")

        assert not result.success
        assert result.returncode == TIMEOUT_EXIT_CODE
        process.kill.assert_called_once()
        process.wait.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_binary(self, executor):
        spawn = AsyncMock(side_effect=FileNotFoundError("No such file or directory: 'zfs'"))

        with patch("asyncio.create_subprocess_exec", new=spawn):
            result = await executor.execute_system("zfs", "get")

        assert not result.success
        assert result.returncode == 1
        assert "Command execution failed" in result.stderr

    @pytest.mark.asyncio
    async def test_undecodable_output_is_replaced(self, executor):
        process = make_process(stdout=b"tank\xff\n")

        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)):
            result = await executor.execute_system("zpool", "status")

        assert result.stdout == "tank�"
