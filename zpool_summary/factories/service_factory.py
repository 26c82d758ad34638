"""
Service factory for dependency injection and service creation.
"""
from typing import Optional

from ..config import SummaryConfig, get_config
from ..core.interfaces.command_executor import ICommandExecutor
from ..core.interfaces.logger_interface import ILogger
from ..infrastructure.command_executor import CommandExecutor
from ..infrastructure.logging.structured_logger import StructuredLogger
from ..parsers.capacity_parser import CapacityListParser
from ..parsers.status_parser import StatusReportParser
from ..services.summary_service import SummaryService


class ServiceFactory:
    """Factory for creating service instances with proper dependency injection."""

    def __init__(self, config: Optional[SummaryConfig] = None):
        self._config = config or get_config()
        self._executor: ICommandExecutor = CommandExecutor(timeout=self._config.command_timeout)
        self._logger: ILogger = StructuredLogger(name="zpool_summary", level=self._config.log_level)

    @property
    def logger(self) -> ILogger:
        return self._logger

    def create_summary_service(self) -> SummaryService:
        """Create a SummaryService instance with injected dependencies."""
        self._logger.debug("Effective configuration", self._config.get_summary())
        return SummaryService(
            executor=self._executor,
            logger=self._logger,
            capacity_parser=CapacityListParser(self._logger),
            status_parser=StatusReportParser(self._logger)
        )
