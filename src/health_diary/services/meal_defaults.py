"""Effective-dated default portions per meal slot."""

import logging
from bisect import bisect_right
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from health_diary.domain.meals import (
    MealEntry,
    MealSlot,
    MealSlotConfig,
    MealSlotDefaultVersion,
)

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal slots, entries and default history."""

    def list_meal_slots(self) -> list[MealSlot]:
        """Return configured meal slots ordered by slot number."""

    def list_meal_entries(self, day: date) -> list[MealEntry]:
        """Return meal entries recorded for a day."""

    def list_meal_entries_in_range(self, start: date, end: date) -> list[MealEntry]:
        """Return meal entries in an inclusive range, ordered by date."""

    def upsert_meal_entry(self, entry: MealEntry) -> None:
        """Insert or replace the entry for (day, slot)."""

    def list_default_versions(self, slot: int) -> list[MealSlotDefaultVersion]:
        """Return the default history for a slot ordered by effective date."""

    def upsert_default_version(
        self, slot: int, amount: int, effective_date: date
    ) -> None:
        """Insert a version or overwrite the amount at (slot, effective_date)."""


@dataclass
class MealDefaultsService:
    """Resolves and records default portions over time."""

    repository: MealRepository

    def resolve(self, slot: int, query_date: date) -> int:
        """Return the default amount in force for a slot on a date."""
        return resolve_amount(self.repository.list_default_versions(slot), query_date)

    def resolve_all(self, slots: Iterable[int], query_date: date) -> dict[int, int]:
        """Return resolved defaults for several slots on one date."""
        return {slot: self.resolve(slot, query_date) for slot in slots}

    def set_default(self, slot: int, amount: int, effective_date: date) -> None:
        """Record a default amount for a slot starting on a date."""
        if amount < 0:
            raise ValueError("Default amount must not be negative")
        self.repository.upsert_default_version(slot, amount, effective_date)
        logger.info(
            "Set meal default",
            extra={
                "slot": slot,
                "amount": amount,
                "effective_date": effective_date.isoformat(),
            },
        )

    def history(self, slot: int) -> list[MealSlotDefaultVersion]:
        """Return the default history for a slot, oldest first."""
        return sorted(
            self.repository.list_default_versions(slot),
            key=lambda version: version.effective_date,
        )

    def list_meal_config(self, on_date: date) -> list[MealSlotConfig]:
        """Return configured slots with their defaults on a date."""
        return [
            MealSlotConfig(
                slot=meal_slot.slot,
                label=meal_slot.label,
                default_amount=self.resolve(meal_slot.slot, on_date),
            )
            for meal_slot in self.repository.list_meal_slots()
        ]


def resolve_amount(
    versions: Iterable[MealSlotDefaultVersion], query_date: date
) -> int:
    """Pick the amount of the latest version effective on or before a date."""
    ordered = sorted(versions, key=lambda version: version.effective_date)
    dates = [version.effective_date for version in ordered]
    index = bisect_right(dates, query_date)
    if index == 0:
        return 0
    return ordered[index - 1].amount
