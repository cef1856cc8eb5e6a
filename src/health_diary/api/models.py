"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field

from health_diary.domain.days import DayUpdate, MealUpdate, MedicationUpdate
from health_diary.domain.meals import MealStatus
from health_diary.domain.observations import ObservationPatch


class MedicationEntryPayload(BaseModel):
    """Taken flag for one medication."""

    id: int
    taken: bool
    comment: str | None = None


class MealEntryPayload(BaseModel):
    """Meal outcome for one slot."""

    slot: int = Field(gt=0)
    status: MealStatus = MealStatus.ATE_FULLY
    actual_amount: int | None = Field(default=None, ge=0)
    set_default_amount: int | None = Field(default=None, ge=0)
    comment: str | None = None


class DayUpdatePayload(BaseModel):
    """Partial update of a day."""

    teeth_brushed: bool | None = None
    teeth_comment: str | None = None
    vomited: int | None = Field(default=None, ge=0)
    vomited_comment: str | None = None
    peed: int | None = Field(default=None, ge=0)
    peed_comment: str | None = None
    pooped: int | None = Field(default=None, ge=0)
    pooped_comment: str | None = None
    drank: int | None = Field(default=None, ge=0)
    drank_comment: str | None = None
    daily_notes: str | None = None
    medications: list[MedicationEntryPayload] | None = None
    meals: list[MealEntryPayload] | None = None

    def to_update(self) -> DayUpdate:
        """Convert the payload into a domain update."""
        return DayUpdate(
            observation=ObservationPatch(
                teeth_brushed=self.teeth_brushed,
                teeth_comment=self.teeth_comment,
                vomit_count=self.vomited,
                vomit_comment=self.vomited_comment,
                pee_count=self.peed,
                pee_comment=self.peed_comment,
                poop_count=self.pooped,
                poop_comment=self.pooped_comment,
                drink_count=self.drank,
                drink_comment=self.drank_comment,
                notes=self.daily_notes,
            ),
            medications=[
                MedicationUpdate(
                    medication_id=item.id, taken=item.taken, comment=item.comment
                )
                for item in self.medications or []
            ],
            meals=[
                MealUpdate(
                    slot=item.slot,
                    status=item.status,
                    actual_amount=item.actual_amount,
                    comment=item.comment,
                    set_default_amount=item.set_default_amount,
                )
                for item in self.meals or []
            ],
        )


class MedicationCreatePayload(BaseModel):
    """New medication."""

    name: str = Field(min_length=1)
    time_label: str


class MedicationUpdatePayload(BaseModel):
    """Changes to a medication."""

    name: str | None = None
    time_label: str | None = None
    sort_order: int | None = None


class MealDefaultPayload(BaseModel):
    """New default amount for a meal slot."""

    amount: int = Field(ge=0)
    effective_date: date | None = None
