"""Core domain entities"""

from .pool import CapacityRecord, CapacityTable, StatusTable

__all__ = [
    'CapacityRecord',
    'CapacityTable',
    'StatusTable'
]
