"""
Parser for `zfs get -d 0 -Hp -o name,property,value available,used`.

Each line is `name<TAB>property<TAB>value` with the value in raw bytes. Any
anomaly discards the whole listing: if the output format changed or the
command misbehaved, reporting "Unknown" beats showing a partial pool list.
"""
from collections import OrderedDict
from typing import Dict, List, Optional

from ..core.entities.pool import CapacityRecord, CapacityTable
from ..core.interfaces.logger_interface import ILogger
from ..core.interfaces.result_parser import IResultParser
from ..core.value_objects.pool_name import is_valid_pool_name

CAPACITY_PROPERTIES = ("available", "used")

# Byte counts are 64-bit unsigned; anything wider is treated as unparsable.
UNSIGNED_LIMIT = 2 ** 64


def parse_unsigned(text: str) -> int:
    """Parse a non-negative 64-bit decimal integer, returning 0 for anything else."""
    if not (text.isascii() and text.isdigit()):
        return 0
    value = int(text)
    return value if value < UNSIGNED_LIMIT else 0


class CapacityListParser(IResultParser[CapacityTable]):
    """Turns the capacity listing into an ordered CapacityTable."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._logger = logger

    def parse(self, raw_output: str) -> CapacityTable:
        # name -> [available, used], in order of first appearance
        values: "OrderedDict[str, List[int]]" = OrderedDict()

        for line_number, line in enumerate(raw_output.split('\n'), start=1):
            if not line:
                continue

            columns = line.split('\t')
            if len(columns) < 3:
                return self._reject(line_number, "too few columns", line)
            if len(columns) > 3:
                return self._reject(line_number, "trailing columns", line)

            name, prop, raw_value = columns
            value = parse_unsigned(raw_value)

            if not name or not prop or value == 0:
                return self._reject(line_number, "empty or zero field", line)

            if not is_valid_pool_name(name):
                return self._reject(line_number, "invalid pool name", line)

            if prop not in CAPACITY_PROPERTIES:
                return self._reject(line_number, "unknown property", line)

            pair = values.setdefault(name, [0, 0])
            pair[CAPACITY_PROPERTIES.index(prop)] = value

        records = []
        for name, (available, used) in values.items():
            record = CapacityRecord(available=available, used=used)
            if not record.is_complete:
                self._log_debug(f"Dropping pool with incomplete capacity: {name}", {"pool": name})
                continue
            records.append((name, record))

        return CapacityTable(records)

    def _reject(self, line_number: int, reason: str, line: str) -> CapacityTable:
        if self._logger:
            self._logger.warning(f"Discarding capacity listing: {reason} on line {line_number}", {
                "line_number": line_number,
                "reason": reason,
                "raw_line": line
            })
        return CapacityTable()

    def _log_debug(self, message: str, extra: Dict[str, str]) -> None:
        if self._logger:
            self._logger.debug(message, extra)
