"""Domain models for meal tracking."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class MealStatus(StrEnum):
    """How much of a meal was eaten."""

    ATE_FULLY = "ate_fully"
    NOT_FULLY = "not_fully"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class MealSlot:
    """A configured feeding occasion within a day."""

    slot: int
    label: str


@dataclass(frozen=True)
class MealEntry:
    """Recorded outcome of one meal slot on one day."""

    day: date
    slot: int
    status: MealStatus = MealStatus.ATE_FULLY
    actual_amount: int | None = None
    comment: str | None = None


@dataclass(frozen=True)
class MealSlotDefaultVersion:
    """Default portion for a slot, in force from ``effective_date`` onward."""

    slot: int
    amount: int
    effective_date: date


@dataclass(frozen=True)
class MealSlotConfig:
    """Meal slot with the default portion resolved for a given date."""

    slot: int
    label: str
    default_amount: int
