"""Trend summaries over recorded days."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta

from health_diary.domain.meals import MealEntry, MealStatus
from health_diary.domain.status import DayStatus, classify_day, day_issues
from health_diary.domain.trends import (
    DailyMealPoint,
    DailyVomitPoint,
    DateRange,
    ProblemDay,
    TrendsSummary,
)
from health_diary.services.days import ObservationRepository
from health_diary.services.meal_defaults import MealRepository

ALL_PERIOD = "all"


@dataclass
class TrendsService:
    """Service for summarizing days and listing problem days.

    Statuses are always derived from the raw counts and meal entries, never
    read back from a stored copy.
    """

    observations: ObservationRepository
    meals: MealRepository
    default_period_days: int = 7

    def resolve_period(self, period: str | None, today: date) -> DateRange:
        """Turn a period selector like "7", "30" or "all" into a date range."""
        if period == ALL_PERIOD:
            earliest = self.observations.earliest_date()
            return DateRange(start=earliest or today, end=today)
        days = _parse_days(period) or self.default_period_days
        return DateRange(start=today - timedelta(days=days - 1), end=today)

    def summarize(self, start: date, end: date) -> TrendsSummary:
        """Return aggregated statistics for an inclusive date range."""
        observations = self.observations.list_observations(start, end)
        meal_entries = self.meals.list_meal_entries_in_range(start, end)
        meals_by_day = _group_by_day(meal_entries)

        status_counts = {status: 0 for status in DayStatus}
        for observation in observations:
            status = classify_day(observation, meals_by_day.get(observation.day, []))
            status_counts[status] += 1

        total_days = len({observation.day for observation in observations})
        days_with_vomit = sum(1 for obs in observations if obs.vomit_count > 0)
        newest_first = sorted(observations, key=lambda obs: obs.day, reverse=True)

        return TrendsSummary(
            period=DateRange(start=start, end=end),
            total_days=total_days,
            status_counts=status_counts,
            days_with_vomit=days_with_vomit,
            days_without_vomit=total_days - days_with_vomit,
            pee_days=sum(1 for obs in observations if obs.pee_count > 0),
            poop_days=sum(1 for obs in observations if obs.poop_count > 0),
            no_pee_dates=[obs.day for obs in newest_first if obs.pee_count == 0],
            no_poop_dates=[obs.day for obs in newest_first if obs.poop_count == 0],
            total_meals=len(meal_entries),
            missed_meals=sum(1 for entry in meal_entries if _is_missed(entry)),
            daily_meals=[
                DailyMealPoint(
                    day=day,
                    missed=sum(1 for entry in entries if _is_missed(entry)),
                )
                for day, entries in sorted(meals_by_day.items())
            ],
            daily_vomit=[
                DailyVomitPoint(day=obs.day, vomited=obs.vomit_count)
                for obs in sorted(observations, key=lambda obs: obs.day)
            ],
        )

    def problem_days(self, start: date, end: date) -> list[ProblemDay]:
        """Return non-GREEN days in the range, newest first."""
        observations = self.observations.list_observations(start, end)
        meals_by_day = _group_by_day(self.meals.list_meal_entries_in_range(start, end))
        slot_labels = {slot.slot: slot.label for slot in self.meals.list_meal_slots()}

        problems = []
        for observation in sorted(observations, key=lambda obs: obs.day, reverse=True):
            meals = meals_by_day.get(observation.day, [])
            status = classify_day(observation, meals)
            if not status.is_problem:
                continue
            problems.append(
                ProblemDay(
                    day=observation.day,
                    status=status,
                    issues=day_issues(observation, meals, slot_labels),
                )
            )
        return problems


def _group_by_day(entries: list[MealEntry]) -> dict[date, list[MealEntry]]:
    grouped: dict[date, list[MealEntry]] = defaultdict(list)
    for entry in entries:
        grouped[entry.day].append(entry)
    return dict(grouped)


def _is_missed(entry: MealEntry) -> bool:
    return entry.status != MealStatus.ATE_FULLY


def _parse_days(period: str | None) -> int | None:
    if period is None:
        return None
    cleaned = period.strip()
    if not cleaned.isdigit():
        return None
    days = int(cleaned)
    return days if days > 0 else None
