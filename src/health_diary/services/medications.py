"""Medication catalogue service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from health_diary.domain.medications import Medication, MedicationEntry

logger = logging.getLogger(__name__)


class MedicationNotFoundError(LookupError):
    """Raised when a medication id does not exist."""


class MedicationRepository(Protocol):
    """Persistence interface for medications and their daily entries."""

    def list_medications(self, include_inactive: bool) -> list[Medication]:
        """Return medications ordered by sort order."""

    def get_medication(self, medication_id: int) -> Medication | None:
        """Return a medication by id."""

    def create_medication(
        self, name: str, time_label: str, sort_order: int
    ) -> Medication:
        """Create a medication and return it."""

    def max_sort_order(self) -> int | None:
        """Return the largest sort order in use."""

    def update_medication(self, medication_id: int, changes: dict[str, object]) -> None:
        """Update catalogue columns for a medication."""

    def list_medication_entries(self, day: date) -> list[MedicationEntry]:
        """Return medication entries recorded for a day."""

    def upsert_medication_entry(self, entry: MedicationEntry) -> None:
        """Insert or replace the entry for (day, medication_id)."""


@dataclass
class MedicationService:
    """Service for managing the medication catalogue."""

    repository: MedicationRepository

    def list_medications(self, include_inactive: bool = False) -> list[Medication]:
        """Return active medications, or all of them when requested."""
        return self.repository.list_medications(include_inactive)

    def add_medication(self, name: str, time_label: str) -> Medication:
        """Add a medication at the end of the list."""
        sort_order = (self.repository.max_sort_order() or 0) + 1
        medication = self.repository.create_medication(name, time_label, sort_order)
        logger.info("Added medication", extra={"medication_id": medication.id})
        return medication

    def update_medication(
        self,
        medication_id: int,
        name: str | None = None,
        time_label: str | None = None,
        sort_order: int | None = None,
    ) -> None:
        """Rename, relabel or reorder a medication."""
        self._require(medication_id)
        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name
        if time_label is not None:
            changes["time_label"] = time_label
        if sort_order is not None:
            changes["sort_order"] = sort_order
        if changes:
            self.repository.update_medication(medication_id, changes)

    def deactivate_medication(self, medication_id: int) -> None:
        """Hide a medication from the daily list while keeping its history."""
        self._require(medication_id)
        self.repository.update_medication(medication_id, {"is_active": False})
        logger.info("Deactivated medication", extra={"medication_id": medication_id})

    def _require(self, medication_id: int) -> Medication:
        medication = self.repository.get_medication(medication_id)
        if medication is None:
            raise MedicationNotFoundError(medication_id)
        return medication
