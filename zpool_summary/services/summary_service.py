from types import MappingProxyType
from typing import Optional

from ..core.entities.pool import CapacityTable, StatusTable
from ..core.exceptions.summary_exceptions import CommandFailedError
from ..core.interfaces.command_executor import ICommandExecutor
from ..core.interfaces.logger_interface import ILogger
from ..core.result import Result
from ..parsers.capacity_parser import CapacityListParser
from ..parsers.status_parser import StatusReportParser
from .summary_builder import build_summary

CAPACITY_COMMAND = ("zfs", "get", "-d", "0", "-Hp", "-o", "name,property,value", "available,used")
STATUS_COMMAND = ("zpool", "status")


class SummaryService:
    """Queries ZFS and produces the one-line pool summary."""

    def __init__(self,
                 executor: ICommandExecutor,
                 logger: ILogger,
                 capacity_parser: Optional[CapacityListParser] = None,
                 status_parser: Optional[StatusReportParser] = None):
        self._executor = executor
        self._logger = logger
        self._capacity_parser = capacity_parser or CapacityListParser(logger)
        self._status_parser = status_parser or StatusReportParser(logger)

    async def get_summary(self) -> str:
        """Build the summary line. Never raises for command or parse failures."""
        pools = await self.list_pools()
        if not pools:
            self._logger.info("No pools found")
            return build_summary(pools, MappingProxyType({}))

        statuses = await self.stat_pools()
        missing = [name for name in pools if name not in statuses]
        if missing:
            self._logger.warning("No status for pools, reporting errors", {"pools": missing})

        return build_summary(pools, statuses)

    async def list_pools(self) -> CapacityTable:
        output = await self._command_output(*CAPACITY_COMMAND)
        pools = self._capacity_parser.parse(output.value_or(""))
        self._logger.info(f"Listed {len(pools)} pools", {"pools": list(pools)})
        return pools

    async def stat_pools(self) -> StatusTable:
        output = await self._command_output(*STATUS_COMMAND)
        statuses = self._status_parser.parse(output.value_or(""))
        self._logger.info(f"Parsed status for {len(statuses)} pools")
        return statuses

    async def _command_output(self, command: str, *args: str) -> Result[str, CommandFailedError]:
        result = await self._executor.execute_system(command, *args)

        if not result.success:
            error = CommandFailedError([command, *args], result.returncode, result.stderr)
            self._logger.warning(str(error), error.to_dict())
            return Result.failure(error)

        return Result.success(result.stdout)
