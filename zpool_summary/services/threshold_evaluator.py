"""
Capacity heuristics for a single pool.
"""
from dataclasses import dataclass

from ..core.entities.pool import CapacityRecord

GIGABYTE = 1000 ** 3
TERABYTE = 1000 ** 4

# Pools smaller than this are assumed to be boot pools.
BOOTPOOL_MAX_SIZE = 5 * GIGABYTE


@dataclass(frozen=True)
class Thresholds:
    """Classification of a pool by its capacity."""
    is_bootpool: bool
    is_low: bool


def low_space_divisor(size: int) -> int:
    """Less than 5% available is low for 1 TB and up, less than 10% otherwise."""
    return 20 if size >= TERABYTE else 10


def is_low(record: CapacityRecord) -> bool:
    size = record.size
    return record.available < size // low_space_divisor(size)


def is_bootpool(record: CapacityRecord) -> bool:
    return record.size < BOOTPOOL_MAX_SIZE


def evaluate(record: CapacityRecord) -> Thresholds:
    return Thresholds(is_bootpool=is_bootpool(record), is_low=is_low(record))
