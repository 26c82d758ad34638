"""Command output parsers"""

from .capacity_parser import CapacityListParser, parse_unsigned
from .status_parser import StatusReportParser, collapse_indentation

__all__ = [
    'CapacityListParser',
    'StatusReportParser',
    'collapse_indentation',
    'parse_unsigned'
]
