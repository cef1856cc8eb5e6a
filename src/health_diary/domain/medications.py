"""Domain models for medications."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Medication:
    """A medication in the catalogue."""

    id: int
    name: str
    time_label: str
    is_active: bool = True
    sort_order: int = 0


@dataclass(frozen=True)
class MedicationEntry:
    """Whether a medication was given on a day."""

    day: date
    medication_id: int
    taken: bool
    comment: str | None = None
