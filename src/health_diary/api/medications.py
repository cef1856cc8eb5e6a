"""Medication catalogue endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from health_diary.api.models import MedicationCreatePayload, MedicationUpdatePayload
from health_diary.api.serialization import serialize_medication
from health_diary.services.medications import MedicationNotFoundError

if TYPE_CHECKING:
    from health_diary.containers import AppContainer

router = APIRouter(prefix="/api/medications", tags=["medications"])


@router.get("")
def list_medications(
    request: Request, include_inactive: bool = Query(False, alias="includeInactive")
) -> list[dict[str, object]]:
    """Return the medication list."""
    container: AppContainer = request.app.state.container
    medications = container.medication_service.list_medications(include_inactive)
    return [serialize_medication(medication) for medication in medications]


@router.post("")
def add_medication(
    payload: MedicationCreatePayload, request: Request
) -> dict[str, object]:
    """Add a medication to the end of the list."""
    container: AppContainer = request.app.state.container
    medication = container.medication_service.add_medication(
        payload.name, payload.time_label
    )
    return serialize_medication(medication)


@router.put("/{medication_id}")
def update_medication(
    medication_id: int, payload: MedicationUpdatePayload, request: Request
) -> dict[str, bool]:
    """Rename, relabel or reorder a medication."""
    container: AppContainer = request.app.state.container
    try:
        container.medication_service.update_medication(
            medication_id,
            name=payload.name,
            time_label=payload.time_label,
            sort_order=payload.sort_order,
        )
    except MedicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    return {"success": True}


@router.delete("/{medication_id}")
def deactivate_medication(medication_id: int, request: Request) -> dict[str, bool]:
    """Soft-delete a medication."""
    container: AppContainer = request.app.state.container
    try:
        container.medication_service.deactivate_medication(medication_id)
    except MedicationNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    return {"success": True}
