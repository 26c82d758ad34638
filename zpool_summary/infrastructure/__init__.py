"""Infrastructure implementations of the core interfaces"""

from .command_executor import CommandExecutor
from .logging.structured_logger import StructuredLogger

__all__ = [
    'CommandExecutor',
    'StructuredLogger'
]
