"""Domain models for the full day view."""

from dataclasses import dataclass, field

from health_diary.domain.meals import MealStatus
from health_diary.domain.observations import DailyObservation, ObservationPatch
from health_diary.domain.status import DayStatus


@dataclass(frozen=True)
class MedicationStatus:
    """Catalogue medication merged with its entry for the day."""

    id: int
    name: str
    time_label: str
    is_active: bool
    taken: bool
    comment: str | None


@dataclass(frozen=True)
class MealView:
    """Meal slot merged with its entry and the default in force that day."""

    slot: int
    label: str
    default_amount: int
    status: MealStatus
    actual_amount: int | None
    comment: str | None


@dataclass(frozen=True)
class DayView:
    """Everything recorded for one day."""

    observation: DailyObservation
    status: DayStatus
    medications: list[MedicationStatus]
    meals: list[MealView]


@dataclass(frozen=True)
class MedicationUpdate:
    """Taken flag for one medication on a day."""

    medication_id: int
    taken: bool
    comment: str | None = None


@dataclass(frozen=True)
class MealUpdate:
    """Meal outcome for one slot, optionally setting a new default from that day."""

    slot: int
    status: MealStatus
    actual_amount: int | None = None
    comment: str | None = None
    set_default_amount: int | None = None


@dataclass(frozen=True)
class DayUpdate:
    """All changes submitted for a day in one request."""

    observation: ObservationPatch = field(default_factory=ObservationPatch)
    medications: list[MedicationUpdate] = field(default_factory=list)
    meals: list[MealUpdate] = field(default_factory=list)
