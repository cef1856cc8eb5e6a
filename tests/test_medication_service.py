"""Tests for the medication service."""

import pytest

from health_diary.services.medications import (
    MedicationNotFoundError,
    MedicationService,
)


@pytest.fixture
def service(medication_repository) -> MedicationService:
    return MedicationService(medication_repository)


def test_add_medication_appends_sort_order(service) -> None:
    first = service.add_medication("Normolact", "morning")
    second = service.add_medication("Renalvet", "evening with food")

    assert first.sort_order == 1
    assert second.sort_order == 2
    assert [m.name for m in service.list_medications()] == ["Normolact", "Renalvet"]


def test_deactivate_hides_from_default_list(service) -> None:
    kept = service.add_medication("Normolact", "morning")
    dropped = service.add_medication("Gabapentin", "evening")

    service.deactivate_medication(dropped.id)

    assert [m.id for m in service.list_medications()] == [kept.id]
    assert [m.id for m in service.list_medications(include_inactive=True)] == [
        kept.id,
        dropped.id,
    ]


def test_update_medication_changes_only_given_fields(
    service, medication_repository
) -> None:
    medication = service.add_medication("Normolact", "morning")

    service.update_medication(medication.id, time_label="evening", sort_order=9)

    updated = medication_repository.get_medication(medication.id)
    assert updated.name == "Normolact"
    assert updated.time_label == "evening"
    assert updated.sort_order == 9


def test_unknown_medication_raises(service) -> None:
    with pytest.raises(MedicationNotFoundError):
        service.deactivate_medication(42)
    with pytest.raises(MedicationNotFoundError):
        service.update_medication(42, name="x")
