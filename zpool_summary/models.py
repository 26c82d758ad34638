from pydantic import BaseModel, Field, computed_field
from typing import Optional

from .core.entities.pool import CapacityRecord
from .services import threshold_evaluator
from .utils import format_bytes_short


class PoolSummary(BaseModel):
    """One pool as it appears (or is hidden) in the summary line."""
    name: str
    available: int = Field(ge=0)
    used: int = Field(ge=0)
    has_errors: bool = True

    @classmethod
    def from_record(cls, name: str, record: CapacityRecord, has_errors: bool) -> 'PoolSummary':
        return cls(name=name, available=record.available, used=record.used, has_errors=has_errors)

    @property
    def record(self) -> CapacityRecord:
        return CapacityRecord(available=self.available, used=self.used)

    @property
    def thresholds(self) -> threshold_evaluator.Thresholds:
        return threshold_evaluator.evaluate(self.record)

    @computed_field
    def size(self) -> int:
        return self.available + self.used

    @computed_field
    def is_low(self) -> bool:
        return self.thresholds.is_low

    @computed_field
    def is_bootpool(self) -> bool:
        return self.thresholds.is_bootpool

    @computed_field
    def available_human(self) -> str:
        return format_bytes_short(self.available)

    @computed_field
    def annotation(self) -> Optional[str]:
        # Errors win over low space; never both.
        if self.has_errors:
            return "ERRORS"
        if self.is_low:
            return "low"
        return None

    @computed_field
    def suppressed(self) -> bool:
        """Healthy boot pools with room to spare are left out of the summary."""
        return self.is_bootpool and not self.has_errors and not self.is_low

    def render(self) -> str:
        text = f"{self.name}: {self.available_human}"
        if self.annotation:
            text += f" ({self.annotation})"
        return text
