"""JSON payload builders for API responses."""

from health_diary.domain.days import DayView
from health_diary.domain.meals import MealSlotConfig
from health_diary.domain.medications import Medication
from health_diary.domain.status import DayStatus
from health_diary.domain.trends import ProblemDay, TrendsSummary


def serialize_day(view: DayView) -> dict[str, object]:
    observation = view.observation
    return {
        "date": observation.day.isoformat(),
        "teeth_brushed": int(observation.teeth_brushed),
        "teeth_comment": observation.teeth_comment,
        "vomited": observation.vomit_count,
        "vomited_comment": observation.vomit_comment,
        "peed": observation.pee_count,
        "peed_comment": observation.pee_comment,
        "pooped": observation.poop_count,
        "pooped_comment": observation.poop_comment,
        "drank": observation.drink_count,
        "drank_comment": observation.drink_comment,
        "daily_notes": observation.notes,
        "day_status": view.status.value,
        "medications": [
            {
                "id": medication.id,
                "name": medication.name,
                "time_label": medication.time_label,
                "is_active": int(medication.is_active),
                "taken": int(medication.taken),
                "comment": medication.comment,
            }
            for medication in view.medications
        ],
        "meals": [
            {
                "meal_slot": meal.slot,
                "label": meal.label,
                "default_amount": meal.default_amount,
                "status": meal.status.value,
                "actual_amount": meal.actual_amount,
                "comment": meal.comment,
            }
            for meal in view.meals
        ],
    }


def serialize_medication(medication: Medication) -> dict[str, object]:
    return {
        "id": medication.id,
        "name": medication.name,
        "time_label": medication.time_label,
        "is_active": int(medication.is_active),
        "sort_order": medication.sort_order,
    }


def serialize_meal_config(config: MealSlotConfig) -> dict[str, object]:
    return {
        "meal_slot": config.slot,
        "label": config.label,
        "default_amount": config.default_amount,
    }


def serialize_trends(summary: TrendsSummary) -> dict[str, object]:
    """Build the trends payload in the shape the client charts expect."""
    return {
        "period": {
            "start": summary.period.start.isoformat(),
            "end": summary.period.end.isoformat(),
        },
        "totalDays": summary.total_days,
        "statusCounts": {
            status.value: summary.status_counts.get(status, 0)
            for status in (DayStatus.RED, DayStatus.ORANGE, DayStatus.GREEN)
        },
        "vomiting": {
            "daysWithVomit": summary.days_with_vomit,
            "daysWithoutVomit": summary.days_without_vomit,
        },
        "peePoop": {
            "peeDays": summary.pee_days,
            "poopDays": summary.poop_days,
            "noPeeDates": [day.isoformat() for day in summary.no_pee_dates],
            "noPoopDates": [day.isoformat() for day in summary.no_poop_dates],
        },
        "meals": {"total": summary.total_meals, "missed": summary.missed_meals},
        "charts": {
            "dailyMeals": [
                {"date": point.day.isoformat(), "missed": point.missed}
                for point in summary.daily_meals
            ],
            "dailyVomit": [
                {"date": point.day.isoformat(), "vomited": point.vomited}
                for point in summary.daily_vomit
            ],
        },
    }


def serialize_problem_day(problem: ProblemDay) -> dict[str, object]:
    return {
        "date": problem.day.isoformat(),
        "status": problem.status.value,
        "issues": problem.issues,
    }
