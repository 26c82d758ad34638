"""Core domain exceptions"""

from .summary_exceptions import (
    SummaryException,
    CommandException,
    CommandFailedError
)

__all__ = [
    'SummaryException',
    'CommandException',
    'CommandFailedError'
]
