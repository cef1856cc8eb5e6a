"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest
from fastapi.testclient import TestClient

from health_diary.api.app import create_app
from health_diary.config import Settings
from health_diary.containers import AppContainer
from health_diary.domain.meals import MealEntry, MealSlot, MealSlotDefaultVersion
from health_diary.domain.medications import Medication, MedicationEntry
from health_diary.domain.observations import (
    DailyObservation,
    ObservationField,
    apply_patch,
)
from health_diary.domain.status import DayStatus
from health_diary.services.days import DayService, ObservationRepository
from health_diary.services.meal_defaults import MealDefaultsService, MealRepository
from health_diary.services.medications import MedicationRepository, MedicationService
from health_diary.services.trends import TrendsService


def _default_slots() -> list[MealSlot]:
    return [
        MealSlot(1, "morning"),
        MealSlot(2, "day"),
        MealSlot(3, "evening"),
        MealSlot(4, "night"),
    ]


@dataclass
class InMemoryObservationRepository(ObservationRepository):
    """In-memory observation repository for tests."""

    observations: dict[date, DailyObservation] = field(default_factory=dict)
    cached_statuses: dict[date, DayStatus] = field(default_factory=dict)

    def get_observation(self, day: date) -> DailyObservation:
        if day not in self.observations:
            self.observations[day] = DailyObservation(day=day)
        return self.observations[day]

    def apply_patch(self, day: date, changes: dict[ObservationField, object]) -> None:
        self.observations[day] = apply_patch(self.get_observation(day), changes)

    def list_observations(self, start: date, end: date) -> list[DailyObservation]:
        return [
            self.observations[day]
            for day in sorted(self.observations)
            if start <= day <= end
        ]

    def earliest_date(self) -> date | None:
        return min(self.observations, default=None)

    def save_day_status(self, day: date, status: DayStatus) -> None:
        self.cached_statuses[day] = status


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    slots: list[MealSlot] = field(default_factory=_default_slots)
    entries: dict[tuple[date, int], MealEntry] = field(default_factory=dict)
    defaults: dict[tuple[int, date], int] = field(default_factory=dict)

    def list_meal_slots(self) -> list[MealSlot]:
        return sorted(self.slots, key=lambda meal_slot: meal_slot.slot)

    def list_meal_entries(self, day: date) -> list[MealEntry]:
        return [
            entry
            for key, entry in sorted(self.entries.items())
            if key[0] == day
        ]

    def list_meal_entries_in_range(self, start: date, end: date) -> list[MealEntry]:
        return [
            entry
            for key, entry in sorted(self.entries.items())
            if start <= key[0] <= end
        ]

    def upsert_meal_entry(self, entry: MealEntry) -> None:
        self.entries[(entry.day, entry.slot)] = entry

    def list_default_versions(self, slot: int) -> list[MealSlotDefaultVersion]:
        return [
            MealSlotDefaultVersion(slot=key[0], amount=amount, effective_date=key[1])
            for key, amount in sorted(self.defaults.items())
            if key[0] == slot
        ]

    def upsert_default_version(
        self, slot: int, amount: int, effective_date: date
    ) -> None:
        self.defaults[(slot, effective_date)] = amount


@dataclass
class InMemoryMedicationRepository(MedicationRepository):
    """In-memory medication repository for tests."""

    medications: dict[int, Medication] = field(default_factory=dict)
    entries: dict[tuple[date, int], MedicationEntry] = field(default_factory=dict)

    def list_medications(self, include_inactive: bool) -> list[Medication]:
        return sorted(
            (
                medication
                for medication in self.medications.values()
                if include_inactive or medication.is_active
            ),
            key=lambda medication: medication.sort_order,
        )

    def get_medication(self, medication_id: int) -> Medication | None:
        return self.medications.get(medication_id)

    def create_medication(
        self, name: str, time_label: str, sort_order: int
    ) -> Medication:
        medication = Medication(
            id=max(self.medications, default=0) + 1,
            name=name,
            time_label=time_label,
            sort_order=sort_order,
        )
        self.medications[medication.id] = medication
        return medication

    def max_sort_order(self) -> int | None:
        return max(
            (medication.sort_order for medication in self.medications.values()),
            default=None,
        )

    def update_medication(self, medication_id: int, changes: dict[str, object]) -> None:
        current = self.medications[medication_id]
        self.medications[medication_id] = Medication(
            id=current.id,
            name=str(changes.get("name", current.name)),
            time_label=str(changes.get("time_label", current.time_label)),
            is_active=bool(changes.get("is_active", current.is_active)),
            sort_order=int(changes.get("sort_order", current.sort_order)),
        )

    def list_medication_entries(self, day: date) -> list[MedicationEntry]:
        return [entry for key, entry in self.entries.items() if key[0] == day]

    def upsert_medication_entry(self, entry: MedicationEntry) -> None:
        self.entries[(entry.day, entry.medication_id)] = entry


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def observation_repository() -> InMemoryObservationRepository:
    return InMemoryObservationRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def medication_repository() -> InMemoryMedicationRepository:
    return InMemoryMedicationRepository()


@pytest.fixture
def meal_defaults_service(
    meal_repository: InMemoryMealRepository,
) -> MealDefaultsService:
    return MealDefaultsService(meal_repository)


@pytest.fixture
def day_service(
    observation_repository: InMemoryObservationRepository,
    meal_repository: InMemoryMealRepository,
    medication_repository: InMemoryMedicationRepository,
    meal_defaults_service: MealDefaultsService,
) -> DayService:
    return DayService(
        observations=observation_repository,
        meals=meal_repository,
        medications=medication_repository,
        meal_defaults=meal_defaults_service,
    )


@pytest.fixture
def trends_service(
    observation_repository: InMemoryObservationRepository,
    meal_repository: InMemoryMealRepository,
) -> TrendsService:
    return TrendsService(observations=observation_repository, meals=meal_repository)


@pytest.fixture
def container(
    settings: Settings,
    medication_repository: InMemoryMedicationRepository,
    meal_defaults_service: MealDefaultsService,
    day_service: DayService,
    trends_service: TrendsService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        day_service=day_service,
        meal_defaults_service=meal_defaults_service,
        medication_service=MedicationService(medication_repository),
        trends_service=trends_service,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
