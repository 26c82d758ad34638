from abc import ABC, abstractmethod
from typing import Generic, Mapping, TypeVar

TableT = TypeVar('TableT', bound=Mapping)


class IResultParser(ABC, Generic[TableT]):
    """Interface for parsing command output into a pool table"""

    @abstractmethod
    def parse(self, raw_output: str) -> TableT:
        """Parse raw command output. Never raises; malformed input yields an empty table."""
        pass
