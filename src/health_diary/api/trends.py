"""Trend endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from health_diary.api.days import today_for
from health_diary.api.serialization import serialize_problem_day, serialize_trends

if TYPE_CHECKING:
    from health_diary.containers import AppContainer

router = APIRouter(prefix="/api", tags=["trends"])


@router.get("/trends")
def get_trends(request: Request, period: str = "7") -> dict[str, object]:
    """Return summary statistics for the selected period."""
    container: AppContainer = request.app.state.container
    date_range = container.trends_service.resolve_period(period, today_for(container))
    summary = container.trends_service.summarize(date_range.start, date_range.end)
    return serialize_trends(summary)


@router.get("/problem-days")
def get_problem_days(request: Request, period: str = "7") -> list[dict[str, object]]:
    """Return RED and ORANGE days for the selected period, newest first."""
    container: AppContainer = request.app.state.container
    date_range = container.trends_service.resolve_period(period, today_for(container))
    problems = container.trends_service.problem_days(date_range.start, date_range.end)
    return [serialize_problem_day(problem) for problem in problems]
