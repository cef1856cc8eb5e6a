"""Supabase repository for medications."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from health_diary.domain.medications import Medication, MedicationEntry
from health_diary.services.medications import MedicationRepository

_MEDICATION_COLUMNS = "id, name, time_label, is_active, sort_order"


@dataclass
class SupabaseMedicationRepository(MedicationRepository):
    """Supabase implementation for the medication catalogue."""

    client: Client

    def list_medications(self, include_inactive: bool) -> list[Medication]:
        """Return medications ordered by sort order."""
        query = self.client.table("medications").select(_MEDICATION_COLUMNS)
        if not include_inactive:
            query = query.eq("is_active", True)
        response = query.order("sort_order", desc=False).execute()
        return [_parse_medication(row) for row in response.data or []]

    def get_medication(self, medication_id: int) -> Medication | None:
        """Return a medication by id."""
        response = (
            self.client.table("medications")
            .select(_MEDICATION_COLUMNS)
            .eq("id", medication_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_medication(response.data[0])

    def create_medication(
        self, name: str, time_label: str, sort_order: int
    ) -> Medication:
        """Insert a medication row."""
        response = (
            self.client.table("medications")
            .insert({"name": name, "time_label": time_label, "sort_order": sort_order})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create medication")
        return _parse_medication(response.data[0])

    def max_sort_order(self) -> int | None:
        """Return the largest sort order."""
        response = (
            self.client.table("medications")
            .select("sort_order")
            .order("sort_order", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return int(response.data[0].get("sort_order") or 0)

    def update_medication(self, medication_id: int, changes: dict[str, object]) -> None:
        """Update catalogue columns."""
        self.client.table("medications").update(changes).eq(
            "id", medication_id
        ).execute()

    def list_medication_entries(self, day: date) -> list[MedicationEntry]:
        """Return medication entries for a day."""
        response = (
            self.client.table("medication_entries")
            .select("date, medication_id, taken, comment")
            .eq("date", day.isoformat())
            .execute()
        )
        return [
            MedicationEntry(
                day=date.fromisoformat(str(row["date"])),
                medication_id=int(row["medication_id"]),
                taken=bool(row.get("taken")),
                comment=row.get("comment"),
            )
            for row in response.data or []
        ]

    def upsert_medication_entry(self, entry: MedicationEntry) -> None:
        """Insert or replace a medication entry."""
        self.client.table("medication_entries").upsert(
            {
                "date": entry.day.isoformat(),
                "medication_id": entry.medication_id,
                "taken": entry.taken,
                "comment": entry.comment,
            },
            on_conflict="date,medication_id",
        ).execute()


def _parse_medication(row: dict[str, object]) -> Medication:
    return Medication(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        time_label=str(row.get("time_label", "")),
        is_active=bool(row.get("is_active", True)),
        sort_order=int(row.get("sort_order") or 0),
    )
