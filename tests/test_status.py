"""Tests for day status classification."""

from datetime import date
from itertools import product

import pytest

from health_diary.domain.meals import MealEntry, MealStatus
from health_diary.domain.observations import DailyObservation
from health_diary.domain.status import DayStatus, classify, classify_day, day_issues

ATE = MealStatus.ATE_FULLY
NOT_FULLY = MealStatus.NOT_FULLY
SKIPPED = MealStatus.SKIPPED

LABELS = {1: "morning", 2: "day", 3: "evening", 4: "night"}


@pytest.mark.parametrize(
    ("vomit", "pee", "poop", "meals", "expected"),
    [
        (0, 0, 0, [ATE], DayStatus.RED),
        (1, 2, 1, [ATE, ATE], DayStatus.ORANGE),
        (0, 0, 3, [ATE], DayStatus.ORANGE),
        (2, 0, 1, [ATE], DayStatus.RED),
        (0, 1, 1, [NOT_FULLY], DayStatus.ORANGE),
        (0, 1, 1, [ATE, ATE], DayStatus.GREEN),
        (1, 1, 1, [SKIPPED], DayStatus.RED),
        (0, 2, 0, [SKIPPED], DayStatus.ORANGE),
        (0, 0, 0, [], DayStatus.RED),
    ],
)
def test_classify_examples(vomit, pee, poop, meals, expected) -> None:
    assert classify(vomit, pee, poop, meals) is expected


def test_empty_meals_count_as_no_missed_meals() -> None:
    assert classify(0, 1, 1, []) is DayStatus.GREEN


def test_no_elimination_is_always_red() -> None:
    for vomit, meals in product([0, 1, 5], [[], [ATE], [NOT_FULLY, SKIPPED]]):
        assert classify(vomit, 0, 0, meals) is DayStatus.RED


def test_classify_is_deterministic() -> None:
    first = classify(1, 0, 2, [ATE, NOT_FULLY])
    assert all(classify(1, 0, 2, [ATE, NOT_FULLY]) is first for _ in range(10))


def test_weakening_a_condition_never_raises_severity() -> None:
    meal_options = [[ATE], [NOT_FULLY]]
    for vomit, pee, poop, meals in product([0, 1], [0, 1], [0, 1], meal_options):
        base = classify(vomit, pee, poop, meals).severity
        assert classify(0, pee, poop, meals).severity <= base
        assert classify(vomit, max(pee, 1), poop, meals).severity <= base
        assert classify(vomit, pee, max(poop, 1), meals).severity <= base
        assert classify(vomit, pee, poop, [ATE]).severity <= base


def test_severity_order() -> None:
    assert DayStatus.RED.severity > DayStatus.ORANGE.severity > DayStatus.GREEN.severity
    assert not DayStatus.GREEN.is_problem
    assert DayStatus.ORANGE.is_problem


def test_classify_day_uses_meal_entries() -> None:
    day = date(2025, 1, 10)
    observation = DailyObservation(day=day, pee_count=1, poop_count=1)
    meals = [MealEntry(day=day, slot=2, status=NOT_FULLY)]

    assert classify_day(observation, meals) is DayStatus.ORANGE
    assert classify_day(observation, []) is DayStatus.GREEN


def test_day_issues_lists_every_reason() -> None:
    day = date(2025, 1, 10)
    observation = DailyObservation(day=day, vomit_count=2, pee_count=0, poop_count=0)
    meals = [
        MealEntry(day=day, slot=3, status=SKIPPED),
        MealEntry(day=day, slot=1, status=NOT_FULLY),
        MealEntry(day=day, slot=2, status=ATE),
    ]

    assert day_issues(observation, meals, LABELS) == [
        "Vomit: 2",
        "No pee",
        "No poop",
        "Meal 1 (morning) not eaten fully",
        "Meal 3 (evening) not eaten fully",
    ]


def test_day_issues_unknown_slot_label() -> None:
    day = date(2025, 1, 10)
    observation = DailyObservation(day=day, pee_count=1, poop_count=1)
    meals = [MealEntry(day=day, slot=7, status=NOT_FULLY)]

    assert day_issues(observation, meals, LABELS) == ["Meal 7 (slot 7) not eaten fully"]


def test_problem_days_always_have_issues() -> None:
    day = date(2025, 1, 10)
    for vomit, pee, poop, status in product([0, 1], [0, 1], [0, 1], MealStatus):
        observation = DailyObservation(
            day=day, vomit_count=vomit, pee_count=pee, poop_count=poop
        )
        meals = [MealEntry(day=day, slot=1, status=status)]
        if classify_day(observation, meals).is_problem:
            assert day_issues(observation, meals, LABELS)
        else:
            assert day_issues(observation, meals, LABELS) == []
