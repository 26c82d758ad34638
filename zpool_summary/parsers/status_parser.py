"""
Parser for `zpool status`.

Only the device tables matter: for each `pool:` section the lines between the
`NAME STATE ...` header and the next blank line are classified as healthy
(`... ONLINE 0 0 0`) or not.
"""
from types import MappingProxyType
from typing import Dict, Iterator, Optional

from ..core.entities.pool import StatusTable
from ..core.interfaces.logger_interface import ILogger
from ..core.interfaces.result_parser import IResultParser

POOL_PREFIX = "pool: "
TABLE_HEADER_PREFIX = "NAME STATE"
HEALTHY_DEVICE_SUFFIX = "ONLINE 0 0 0"


def collapse_indentation(text: str) -> str:
    """
    Replace tabs with spaces, then drop indentation and repeated spaces so
    every line is a run of single-spaced tokens.
    """
    kept = []
    previous = '\n'
    for c in text.replace('\t', ' '):
        if c == ' ' and previous in (' ', '\n'):
            continue
        kept.append(c)
        previous = c
    return ''.join(kept)


class StatusReportParser(IResultParser[StatusTable]):
    """Turns a status report into a mapping of pool name to has-errors."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._logger = logger

    def parse(self, raw_output: str) -> StatusTable:
        statuses: Dict[str, bool] = {}
        name = ""

        lines = iter(collapse_indentation(raw_output).split('\n'))
        for line in lines:
            if line.startswith(POOL_PREFIX):
                name = line[len(POOL_PREFIX):]
                continue

            if not line.startswith(TABLE_HEADER_PREFIX):
                continue

            error_count, no_error_count = self._count_devices(lines)

            if name:
                # A table without a single healthy device is not trusted.
                statuses[name] = error_count > 0 or no_error_count == 0
                if self._logger:
                    self._logger.debug(f"Pool status parsed: {name}", {
                        "pool": name,
                        "healthy_devices": no_error_count,
                        "faulty_devices": error_count
                    })

            name = ""

        return MappingProxyType(statuses)

    @staticmethod
    def _count_devices(lines: Iterator[str]):
        """Consume device lines up to the next blank line."""
        error_count = 0
        no_error_count = 0
        for line in lines:
            if not line:
                break
            if line.endswith(HEALTHY_DEVICE_SUFFIX):
                no_error_count += 1
            else:
                error_count += 1
        return error_count, no_error_count
