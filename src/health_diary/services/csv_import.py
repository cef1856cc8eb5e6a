"""Import of historical observations from a spreadsheet CSV export."""

import csv
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from health_diary.domain.days import DayUpdate, MealUpdate, MedicationUpdate
from health_diary.domain.meals import MealStatus
from health_diary.domain.observations import ObservationPatch
from health_diary.services.days import DayService

logger = logging.getLogger(__name__)

MEAL_PREFIX = "meal_"
MEDICATION_PREFIX = "med_"
_TRUE_VALUES = {"true", "1", "yes"}
_SKIP_MARKERS = ("не давала", "клинике")


@dataclass(frozen=True)
class ImportResult:
    """Counts of processed CSV rows."""

    imported: int
    skipped: int
    failed: int


@dataclass
class CsvImportService:
    """Loads header-keyed CSV rows into the diary one day at a time."""

    day_service: DayService

    def import_rows(self, lines: Iterable[str]) -> ImportResult:
        """Import every data row and report how many succeeded."""
        imported = skipped = failed = 0
        for row in csv.DictReader(lines):
            raw_date = (row.get("date") or "").strip()
            day = parse_date(raw_date)
            if day is None:
                logger.warning("Skipping row with invalid date", extra={"date": raw_date})
                skipped += 1
                continue
            try:
                self.day_service.update_day(day, build_day_update(row))
            except Exception:
                logger.exception("Failed to import row", extra={"date": raw_date})
                failed += 1
                continue
            imported += 1
        logger.info(
            "CSV import finished",
            extra={"imported": imported, "skipped": skipped, "failed": failed},
        )
        return ImportResult(imported=imported, skipped=skipped, failed=failed)


def build_day_update(row: dict[str, str | None]) -> DayUpdate:
    """Translate one CSV row into a day update."""
    notes = _cell(row, "notes")
    patch = ObservationPatch(
        teeth_brushed=parse_bool(_cell(row, "teeth_brushed")),
        poop_count=parse_count(_cell(row, "pooped")),
        pee_count=parse_count(_cell(row, "peed")),
        drink_count=parse_count(_cell(row, "drank")),
        vomit_count=parse_count(_cell(row, "vomited")),
        notes=notes or None,
    )
    meals = []
    medications = []
    for column in row:
        if column is None:
            continue
        value = _cell(row, column)
        if column.startswith(MEAL_PREFIX) and column[len(MEAL_PREFIX) :].isdigit():
            status = parse_meal_status(value)
            comment = value if status == MealStatus.SKIPPED and value else None
            meals.append(
                MealUpdate(
                    slot=int(column[len(MEAL_PREFIX) :]),
                    status=status,
                    comment=comment,
                )
            )
        elif (
            column.startswith(MEDICATION_PREFIX)
            and column[len(MEDICATION_PREFIX) :].isdigit()
        ):
            medications.append(
                MedicationUpdate(
                    medication_id=int(column[len(MEDICATION_PREFIX) :]),
                    taken=parse_bool(value),
                )
            )
    return DayUpdate(observation=patch, medications=medications, meals=meals)


def parse_date(value: str) -> date | None:
    """Parse DD.MM.YYYY or YYYY-MM-DD into a date."""
    if not value or value == "-":
        return None
    try:
        if "." in value:
            day, month, year = value.split(".")
            return date(int(year), int(month), int(day))
        return date.fromisoformat(value)
    except ValueError:
        return None


def parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def parse_count(value: str) -> int:
    try:
        return max(int(value.strip()), 0)
    except ValueError:
        return 0


def parse_meal_status(value: str) -> MealStatus:
    """Map spreadsheet meal text to a meal status."""
    cleaned = value.strip().lower()
    if not cleaned or cleaned == "-":
        return MealStatus.ATE_FULLY
    if cleaned in {status.value for status in MealStatus}:
        return MealStatus(cleaned)
    if "не доел" in cleaned:
        return MealStatus.NOT_FULLY
    if any(marker in cleaned for marker in _SKIP_MARKERS):
        return MealStatus.SKIPPED
    return MealStatus.ATE_FULLY


def _cell(row: dict[str, str | None], column: str) -> str:
    return (row.get(column) or "").strip()
