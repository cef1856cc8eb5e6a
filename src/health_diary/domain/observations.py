"""Domain models for daily observations."""

from dataclasses import dataclass, fields
from datetime import date
from enum import StrEnum


class ObservationField(StrEnum):
    """Closed set of observation fields that can be updated."""

    TEETH_BRUSHED = "teeth_brushed"
    TEETH_COMMENT = "teeth_comment"
    VOMIT_COUNT = "vomit_count"
    VOMIT_COMMENT = "vomit_comment"
    PEE_COUNT = "pee_count"
    PEE_COMMENT = "pee_comment"
    POOP_COUNT = "poop_count"
    POOP_COMMENT = "poop_comment"
    DRINK_COUNT = "drink_count"
    DRINK_COMMENT = "drink_comment"
    NOTES = "notes"


@dataclass(frozen=True)
class DailyObservation:
    """Observed counts and notes for a single calendar day."""

    day: date
    vomit_count: int = 0
    pee_count: int = 0
    poop_count: int = 0
    drink_count: int = 0
    teeth_brushed: bool = False
    teeth_comment: str | None = None
    vomit_comment: str | None = None
    pee_comment: str | None = None
    poop_comment: str | None = None
    drink_comment: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class ObservationPatch:
    """Partial update of a daily observation.

    A field left as ``None`` is not touched when the patch is applied.
    """

    teeth_brushed: bool | None = None
    teeth_comment: str | None = None
    vomit_count: int | None = None
    vomit_comment: str | None = None
    pee_count: int | None = None
    pee_comment: str | None = None
    poop_count: int | None = None
    poop_comment: str | None = None
    drink_count: int | None = None
    drink_comment: str | None = None
    notes: str | None = None

    def changes(self) -> dict[ObservationField, object]:
        """Return the fields set on this patch keyed by field identifier."""
        return {
            ObservationField(item.name): getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def is_empty(self) -> bool:
        """Return True when the patch carries no changes."""
        return not self.changes()


def apply_patch(
    observation: DailyObservation, changes: dict[ObservationField, object]
) -> DailyObservation:
    """Return a copy of the observation with the given changes merged in."""
    values = {item.name: getattr(observation, item.name) for item in fields(observation)}
    for field_id, value in changes.items():
        values[field_id.value] = value
    return DailyObservation(**values)
