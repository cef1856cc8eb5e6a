"""Day and meal configuration endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException, Request, status

from health_diary.api.models import DayUpdatePayload, MealDefaultPayload
from health_diary.api.serialization import serialize_day, serialize_meal_config

if TYPE_CHECKING:
    from health_diary.containers import AppContainer

router = APIRouter(prefix="/api", tags=["days"])


def today_for(container: AppContainer) -> date:
    """Return the current date in the configured timezone."""
    return datetime.now(tz=ZoneInfo(container.settings.timezone)).date()


@router.get("/day/{day}")
def get_day(day: date, request: Request) -> dict[str, object]:
    """Return everything recorded for a day."""
    container: AppContainer = request.app.state.container
    return serialize_day(container.day_service.get_day(day))


@router.put("/day/{day}")
def update_day(
    day: date, payload: DayUpdatePayload, request: Request
) -> dict[str, object]:
    """Apply changes to a day and return the refreshed day."""
    container: AppContainer = request.app.state.container
    view = container.day_service.update_day(day, payload.to_update())
    return serialize_day(view)


@router.get("/meal-config")
def list_meal_config(request: Request) -> list[dict[str, object]]:
    """Return meal slots with today's default amounts."""
    container: AppContainer = request.app.state.container
    configs = container.meal_defaults_service.list_meal_config(today_for(container))
    return [serialize_meal_config(config) for config in configs]


@router.put("/meal-config/{slot}")
def set_meal_default(
    slot: int, payload: MealDefaultPayload, request: Request
) -> dict[str, bool]:
    """Set a slot's default amount from the given date, or from today."""
    container: AppContainer = request.app.state.container
    effective_date = payload.effective_date or today_for(container)
    try:
        container.meal_defaults_service.set_default(
            slot, payload.amount, effective_date
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"success": True}
