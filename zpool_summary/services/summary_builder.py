"""
Folds the capacity and status tables into the status bar line.
"""
from typing import List

from ..core.entities.pool import CapacityTable, StatusTable
from ..models import PoolSummary

UNKNOWN_SUMMARY = "Unknown\n"


def summarize_pools(pools: CapacityTable, statuses: StatusTable) -> List[PoolSummary]:
    """
    Evaluate every pool, most recently listed first.

    Pools are listed in creation order, so reversing puts the root pool (e.g.
    "zroot") ahead of pools added later. A pool missing from the status table
    counts as having errors.
    """
    return [
        PoolSummary.from_record(name, record, statuses.get(name, True))
        for name, record in pools.newest_first()
    ]


def build_summary(pools: CapacityTable, statuses: StatusTable) -> str:
    if not pools:
        return UNKNOWN_SUMMARY

    entries = [entry.render() for entry in summarize_pools(pools, statuses) if not entry.suppressed]
    return ' '.join(entries) + '\n'
