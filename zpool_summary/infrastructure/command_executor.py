"""
Concrete implementation of command executor interface.
"""
import asyncio
import logging
from typing import List
from ..core.interfaces.command_executor import ICommandExecutor, CommandResult

TIMEOUT_EXIT_CODE = 124


class CommandExecutor(ICommandExecutor):
    """Runs read-only ZFS reporting commands without a shell."""

    def __init__(self, timeout: int = 30):
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

        # Allowed system commands
        self._allowed_system_commands = {'zpool', 'zfs'}

    async def execute_system(self, command: str, *args: str) -> CommandResult:
        """Execute system command with validation."""
        if command not in self._allowed_system_commands:
            return CommandResult(
                success=False,
                returncode=1,
                stdout="",
                stderr=f"System command '{command}' not allowed"
            )

        full_command = [command] + list(args)
        return await self._execute_command(full_command)

    async def _execute_command(self, command: List[str]) -> CommandResult:
        """Execute command with proper error handling."""
        try:
            self.logger.debug(f"Executing command: {' '.join(command)}")

            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                limit=1024*1024  # 1MB limit
            )

            try:
                stdout, stderr = await asyncio.wait_for(
                    process.communicate(),
                    timeout=self.timeout
                )
            except asyncio.TimeoutError:
                process.kill()
                await process.wait()
                self.logger.debug(f"Command timed out after {self.timeout} seconds: {' '.join(command)}")
                return CommandResult(
                    success=False,
                    returncode=TIMEOUT_EXIT_CODE,
                    stdout="",
                    stderr=f"Command timed out after {self.timeout} seconds"
                )

            stdout_str = stdout.decode('utf-8', errors='replace').strip()
            stderr_str = stderr.decode('utf-8', errors='replace').strip()

            return CommandResult(
                returncode=process.returncode,
                stdout=stdout_str,
                stderr=stderr_str
            )

        except Exception as e:
            self.logger.debug(f"Command execution failed: {str(e)}")
            return CommandResult(
                success=False,
                returncode=1,
                stdout="",
                stderr=f"Command execution failed: {str(e)}"
            )
