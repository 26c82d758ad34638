"""Logging infrastructure"""

from .structured_logger import StructuredLogger, StructuredFormatter

__all__ = [
    'StructuredLogger',
    'StructuredFormatter'
]
