"""
Pool domain entities built from the capacity listing and the status report.
"""
from collections import OrderedDict
from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Tuple


@dataclass(frozen=True)
class CapacityRecord:
    """Available and used bytes of a pool. Zero means the property was never set."""
    available: int = 0
    used: int = 0

    def __post_init__(self):
        if self.available < 0 or self.used < 0:
            raise ValueError("Capacity cannot be negative")

    @property
    def size(self) -> int:
        return self.available + self.used

    @property
    def is_complete(self) -> bool:
        """Check if both properties were set by the parse."""
        return self.available != 0 and self.used != 0


class CapacityTable(Mapping[str, CapacityRecord]):
    """
    Read-only mapping of pool name to capacity, ordered by first appearance
    in the capacity listing.
    """

    def __init__(self, records: Iterable[Tuple[str, CapacityRecord]] = ()):
        self._records: "OrderedDict[str, CapacityRecord]" = OrderedDict(records)

    def __getitem__(self, name: str) -> CapacityRecord:
        return self._records[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._records)

    def newest_first(self) -> Iterator[Tuple[str, CapacityRecord]]:
        """Iterate over (name, record) pairs in reverse insertion order."""
        for name in reversed(self._records):
            yield name, self._records[name]


# Pool name -> has errors.
StatusTable = Mapping[str, bool]
