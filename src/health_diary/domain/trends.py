"""Domain models for trend summaries."""

from dataclasses import dataclass, field
from datetime import date

from health_diary.domain.status import DayStatus


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date


@dataclass(frozen=True)
class DailyMealPoint:
    """Missed meal count for a day with meal entries."""

    day: date
    missed: int


@dataclass(frozen=True)
class DailyVomitPoint:
    """Vomit count for a day with an observation."""

    day: date
    vomited: int


@dataclass(frozen=True)
class TrendsSummary:
    """Aggregated statistics over a date range."""

    period: DateRange
    total_days: int
    status_counts: dict[DayStatus, int]
    days_with_vomit: int
    days_without_vomit: int
    pee_days: int
    poop_days: int
    no_pee_dates: list[date] = field(default_factory=list)
    no_poop_dates: list[date] = field(default_factory=list)
    total_meals: int = 0
    missed_meals: int = 0
    daily_meals: list[DailyMealPoint] = field(default_factory=list)
    daily_vomit: list[DailyVomitPoint] = field(default_factory=list)


@dataclass(frozen=True)
class ProblemDay:
    """A non-GREEN day with the reasons behind its status."""

    day: date
    status: DayStatus
    issues: list[str]
