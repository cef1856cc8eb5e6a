"""Supabase repository for daily observations."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from supabase import Client

from health_diary.domain.observations import DailyObservation, ObservationField
from health_diary.domain.status import DayStatus
from health_diary.services.days import ObservationRepository

_TABLE = "daily_records"

_COLUMNS: dict[ObservationField, str] = {
    ObservationField.TEETH_BRUSHED: "teeth_brushed",
    ObservationField.TEETH_COMMENT: "teeth_comment",
    ObservationField.VOMIT_COUNT: "vomited",
    ObservationField.VOMIT_COMMENT: "vomited_comment",
    ObservationField.PEE_COUNT: "peed",
    ObservationField.PEE_COMMENT: "peed_comment",
    ObservationField.POOP_COUNT: "pooped",
    ObservationField.POOP_COMMENT: "pooped_comment",
    ObservationField.DRINK_COUNT: "drank",
    ObservationField.DRINK_COMMENT: "drank_comment",
    ObservationField.NOTES: "daily_notes",
}


@dataclass
class SupabaseObservationRepository(ObservationRepository):
    """Supabase implementation for daily observations."""

    client: Client

    def get_observation(self, day: date) -> DailyObservation:
        """Return the day's observation, inserting an empty row if missing."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        self.client.table(_TABLE).upsert(
            {"date": day.isoformat()}, on_conflict="date", ignore_duplicates=True
        ).execute()
        return DailyObservation(day=day)

    def apply_patch(self, day: date, changes: dict[ObservationField, object]) -> None:
        """Merge changed columns into the day's row in a single upsert."""
        payload: dict[str, object] = {
            _COLUMNS[field_id]: value for field_id, value in changes.items()
        }
        payload["date"] = day.isoformat()
        payload["updated_at"] = datetime.now(tz=UTC).isoformat()
        self.client.table(_TABLE).upsert(payload, on_conflict="date").execute()

    def list_observations(self, start: date, end: date) -> list[DailyObservation]:
        """Return observations within an inclusive date range."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def earliest_date(self) -> date | None:
        """Return the first recorded date."""
        response = (
            self.client.table(_TABLE)
            .select("date")
            .order("date", desc=False)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return date.fromisoformat(str(response.data[0]["date"]))

    def save_day_status(self, day: date, status: DayStatus) -> None:
        """Cache the derived status on the day's row."""
        self.client.table(_TABLE).update({"day_status": status.value}).eq(
            "date", day.isoformat()
        ).execute()


def _parse_row(row: dict[str, object]) -> DailyObservation:
    return DailyObservation(
        day=date.fromisoformat(str(row["date"])),
        vomit_count=int(row.get("vomited") or 0),
        pee_count=int(row.get("peed") or 0),
        poop_count=int(row.get("pooped") or 0),
        drink_count=int(row.get("drank") or 0),
        teeth_brushed=bool(row.get("teeth_brushed")),
        teeth_comment=row.get("teeth_comment"),
        vomit_comment=row.get("vomited_comment"),
        pee_comment=row.get("peed_comment"),
        poop_comment=row.get("pooped_comment"),
        drink_comment=row.get("drank_comment"),
        notes=row.get("daily_notes"),
    )
