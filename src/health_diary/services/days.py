"""Day recording service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from health_diary.domain.days import (
    DayUpdate,
    DayView,
    MealView,
    MedicationStatus,
)
from health_diary.domain.meals import MealEntry, MealStatus
from health_diary.domain.medications import MedicationEntry
from health_diary.domain.observations import DailyObservation, ObservationField
from health_diary.domain.status import DayStatus, classify_day
from health_diary.services.meal_defaults import MealDefaultsService, MealRepository
from health_diary.services.medications import MedicationRepository

logger = logging.getLogger(__name__)


class ObservationRepository(Protocol):
    """Persistence interface for daily observations."""

    def get_observation(self, day: date) -> DailyObservation:
        """Return the observation for a day, creating an empty one if missing."""

    def apply_patch(self, day: date, changes: dict[ObservationField, object]) -> None:
        """Merge the given fields into the day's observation."""

    def list_observations(self, start: date, end: date) -> list[DailyObservation]:
        """Return observations in an inclusive range, ordered by date."""

    def earliest_date(self) -> date | None:
        """Return the earliest date with an observation."""

    def save_day_status(self, day: date, status: DayStatus) -> None:
        """Store a cached copy of the day's derived status."""


@dataclass
class DayService:
    """Service that reads and updates everything recorded for a day."""

    observations: ObservationRepository
    meals: MealRepository
    medications: MedicationRepository
    meal_defaults: MealDefaultsService

    def get_day(self, day: date) -> DayView:
        """Return the full view of a day."""
        observation = self.observations.get_observation(day)
        meal_entries = self.meals.list_meal_entries(day)
        return DayView(
            observation=observation,
            status=classify_day(observation, meal_entries),
            medications=self._medication_statuses(day),
            meals=self._meal_views(day, meal_entries),
        )

    def update_day(self, day: date, update: DayUpdate) -> DayView:
        """Apply submitted changes to a day and return the refreshed view."""
        changes = update.observation.changes()
        if changes:
            self.observations.apply_patch(day, changes)
        else:
            self.observations.get_observation(day)

        for medication in update.medications:
            self.medications.upsert_medication_entry(
                MedicationEntry(
                    day=day,
                    medication_id=medication.medication_id,
                    taken=medication.taken,
                    comment=medication.comment,
                )
            )

        for meal in update.meals:
            if meal.set_default_amount is not None:
                self.meal_defaults.set_default(meal.slot, meal.set_default_amount, day)
            self.meals.upsert_meal_entry(
                MealEntry(
                    day=day,
                    slot=meal.slot,
                    status=meal.status,
                    actual_amount=meal.actual_amount,
                    comment=meal.comment,
                )
            )

        view = self.get_day(day)
        self.observations.save_day_status(day, view.status)
        logger.info(
            "Updated day",
            extra={
                "day": day.isoformat(),
                "fields": sorted(field_id.value for field_id in changes),
                "status": view.status.value,
            },
        )
        return view

    def _medication_statuses(self, day: date) -> list[MedicationStatus]:
        entries = {
            entry.medication_id: entry
            for entry in self.medications.list_medication_entries(day)
        }
        statuses = []
        for medication in self.medications.list_medications(include_inactive=False):
            entry = entries.get(medication.id)
            statuses.append(
                MedicationStatus(
                    id=medication.id,
                    name=medication.name,
                    time_label=medication.time_label,
                    is_active=medication.is_active,
                    taken=entry.taken if entry else False,
                    comment=entry.comment if entry else None,
                )
            )
        return statuses

    def _meal_views(self, day: date, meal_entries: list[MealEntry]) -> list[MealView]:
        entries = {entry.slot: entry for entry in meal_entries}
        views = []
        for meal_slot in self.meals.list_meal_slots():
            entry = entries.get(meal_slot.slot)
            views.append(
                MealView(
                    slot=meal_slot.slot,
                    label=meal_slot.label,
                    default_amount=self.meal_defaults.resolve(meal_slot.slot, day),
                    status=entry.status if entry else MealStatus.ATE_FULLY,
                    actual_amount=entry.actual_amount if entry else None,
                    comment=entry.comment if entry else None,
                )
            )
        return views
