"""Core service interfaces"""

from .command_executor import ICommandExecutor, CommandResult
from .logger_interface import ILogger
from .result_parser import IResultParser

__all__ = [
    'ICommandExecutor',
    'CommandResult',
    'ILogger',
    'IResultParser'
]
