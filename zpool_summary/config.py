"""
zpool-summary configuration

Only ambient knobs live here (logging and command timeout); nothing in this
module changes what the summary line looks like. Values come from
ZPOOL_SUMMARY_* environment variables and fall back to defaults.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "ZPOOL_SUMMARY_"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    """Diagnostics settings (diagnostics go to stderr)"""
    log_level: str = "WARNING"


@dataclass
class CommandConfig:
    """External command settings"""
    # Seconds before a zfs/zpool invocation is killed
    timeout: int = 30


class SummaryConfig:
    """
    Configuration loaded from environment variables.

    Invalid values are reported through the module logger and replaced by
    defaults; a bad setting never stops the summary from being printed.
    """

    def __init__(self):
        self.logging = LoggingConfig()
        self.command = CommandConfig()

        self._load_environment_variables()
        self._validate_configuration()

    def _load_environment_variables(self):
        self.logging.log_level = self._get_string("LOG_LEVEL", self.logging.log_level).upper()
        self.command.timeout = self._get_int("COMMAND_TIMEOUT", self.command.timeout)

    def _get_string(self, key: str, default: str) -> str:
        value = os.getenv(f"{ENV_PREFIX}{key}")
        if value is None or not value.strip():
            return default
        return value.strip()

    def _get_int(self, key: str, default: int) -> int:
        """Get integer value from environment with validation"""
        value = self._get_string(key, str(default))
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid integer value for {ENV_PREFIX}{key}: {value}, using default: {default}")
            return default

    def _validate_configuration(self):
        if self.logging.log_level not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid log level: {self.logging.log_level}, using WARNING")
            self.logging.log_level = LoggingConfig.log_level

        if self.command.timeout <= 0:
            logger.warning(f"Invalid command timeout: {self.command.timeout}, using default: {CommandConfig.timeout}")
            self.command.timeout = CommandConfig.timeout

    def get_summary(self) -> dict:
        return {
            "logging": {
                "log_level": self.logging.log_level,
            },
            "command": {
                "timeout": self.command.timeout,
            },
        }

    @property
    def log_level(self) -> str:
        return self.logging.log_level

    @property
    def command_timeout(self) -> int:
        return self.command.timeout


_config: Optional[SummaryConfig] = None


def get_config() -> SummaryConfig:
    """Get the global configuration instance, loading it on first use"""
    global _config
    if _config is None:
        _config = SummaryConfig()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads the environment"""
    global _config
    _config = None
