"""Supabase repository for meal slots, entries and default history."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from health_diary.domain.meals import (
    MealEntry,
    MealSlot,
    MealSlotDefaultVersion,
    MealStatus,
)
from health_diary.services.meal_defaults import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal data."""

    client: Client

    def list_meal_slots(self) -> list[MealSlot]:
        """Return configured meal slots."""
        response = (
            self.client.table("meal_config")
            .select("meal_slot, label")
            .order("meal_slot", desc=False)
            .execute()
        )
        return [
            MealSlot(slot=int(row["meal_slot"]), label=str(row.get("label") or ""))
            for row in response.data or []
        ]

    def list_meal_entries(self, day: date) -> list[MealEntry]:
        """Return meal entries for a day."""
        response = (
            self.client.table("meal_entries")
            .select("date, meal_slot, status, actual_amount, comment")
            .eq("date", day.isoformat())
            .order("meal_slot", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def list_meal_entries_in_range(self, start: date, end: date) -> list[MealEntry]:
        """Return meal entries within an inclusive date range."""
        response = (
            self.client.table("meal_entries")
            .select("date, meal_slot, status, actual_amount, comment")
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def upsert_meal_entry(self, entry: MealEntry) -> None:
        """Insert or replace a meal entry."""
        self.client.table("meal_entries").upsert(
            {
                "date": entry.day.isoformat(),
                "meal_slot": entry.slot,
                "status": entry.status.value,
                "actual_amount": entry.actual_amount,
                "comment": entry.comment,
            },
            on_conflict="date,meal_slot",
        ).execute()

    def list_default_versions(self, slot: int) -> list[MealSlotDefaultVersion]:
        """Return a slot's default history ordered by effective date."""
        response = (
            self.client.table("meal_default_history")
            .select("meal_slot, default_amount, effective_date")
            .eq("meal_slot", slot)
            .order("effective_date", desc=False)
            .execute()
        )
        return [
            MealSlotDefaultVersion(
                slot=int(row["meal_slot"]),
                amount=int(row.get("default_amount") or 0),
                effective_date=date.fromisoformat(str(row["effective_date"])),
            )
            for row in response.data or []
        ]

    def upsert_default_version(
        self, slot: int, amount: int, effective_date: date
    ) -> None:
        """Insert a default version or overwrite the one at the same date."""
        self.client.table("meal_default_history").upsert(
            {
                "meal_slot": slot,
                "default_amount": amount,
                "effective_date": effective_date.isoformat(),
            },
            on_conflict="meal_slot,effective_date",
        ).execute()


def _parse_entry(row: dict[str, object]) -> MealEntry:
    actual_amount = row.get("actual_amount")
    return MealEntry(
        day=date.fromisoformat(str(row["date"])),
        slot=int(row["meal_slot"]),
        status=MealStatus(str(row.get("status") or MealStatus.ATE_FULLY.value)),
        actual_amount=int(actual_amount) if actual_amount is not None else None,
        comment=row.get("comment"),
    )
