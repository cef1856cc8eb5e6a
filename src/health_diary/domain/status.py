"""Day severity classification.

A day is RED (serious) when:
  - vomiting happened and pee or poop is missing or a meal was not eaten fully
  - or there was neither pee nor poop

A day is ORANGE (moderate) when it is not RED and:
  - vomiting happened
  - or exactly one of pee/poop is missing
  - or a meal was not eaten fully

Otherwise the day is GREEN.
"""

from collections.abc import Iterable, Mapping, Sequence
from enum import StrEnum

from health_diary.domain.meals import MealEntry, MealStatus
from health_diary.domain.observations import DailyObservation

_SEVERITY = {"GREEN": 0, "ORANGE": 1, "RED": 2}


class DayStatus(StrEnum):
    """Severity of a day, ordered RED > ORANGE > GREEN."""

    GREEN = "GREEN"
    ORANGE = "ORANGE"
    RED = "RED"

    @property
    def severity(self) -> int:
        """Return the numeric severity rank."""
        return _SEVERITY[self.value]

    @property
    def is_problem(self) -> bool:
        """Return True for any status other than GREEN."""
        return self is not DayStatus.GREEN


def classify(
    vomit_count: int,
    pee_count: int,
    poop_count: int,
    meal_statuses: Iterable[MealStatus],
) -> DayStatus:
    """Classify a day from its raw counts and meal outcomes."""
    has_vomit = vomit_count > 0
    no_pee = pee_count == 0
    no_poop = poop_count == 0
    has_missed_meal = any(status != MealStatus.ATE_FULLY for status in meal_statuses)

    if has_vomit and (no_pee or no_poop or has_missed_meal):
        return DayStatus.RED
    if no_pee and no_poop:
        return DayStatus.RED

    if has_vomit:
        return DayStatus.ORANGE
    if no_pee or no_poop:
        return DayStatus.ORANGE
    if has_missed_meal:
        return DayStatus.ORANGE

    return DayStatus.GREEN


def classify_day(
    observation: DailyObservation, meals: Iterable[MealEntry]
) -> DayStatus:
    """Classify a stored observation together with its meal entries."""
    return classify(
        observation.vomit_count,
        observation.pee_count,
        observation.poop_count,
        [meal.status for meal in meals],
    )


def day_issues(
    observation: DailyObservation,
    meals: Sequence[MealEntry],
    slot_labels: Mapping[int, str],
) -> list[str]:
    """Describe what made a day a problem day, from the same raw counts."""
    issues: list[str] = []
    if observation.vomit_count > 0:
        issues.append(f"Vomit: {observation.vomit_count}")
    if observation.pee_count == 0:
        issues.append("No pee")
    if observation.poop_count == 0:
        issues.append("No poop")
    for meal in sorted(meals, key=lambda entry: entry.slot):
        if meal.status == MealStatus.ATE_FULLY:
            continue
        label = slot_labels.get(meal.slot, f"slot {meal.slot}")
        issues.append(f"Meal {meal.slot} ({label}) not eaten fully")
    return issues
