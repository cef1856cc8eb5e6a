"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from health_diary.adapters.supabase_meal_repository import SupabaseMealRepository
from health_diary.adapters.supabase_medication_repository import (
    SupabaseMedicationRepository,
)
from health_diary.adapters.supabase_observation_repository import (
    SupabaseObservationRepository,
)
from health_diary.config import Settings
from health_diary.services.days import DayService
from health_diary.services.meal_defaults import MealDefaultsService
from health_diary.services.medications import MedicationService
from health_diary.services.trends import TrendsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    day_service: DayService
    meal_defaults_service: MealDefaultsService
    medication_service: MedicationService
    trends_service: TrendsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    observation_repository = SupabaseObservationRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    medication_repository = SupabaseMedicationRepository(supabase_client)
    meal_defaults_service = MealDefaultsService(meal_repository)
    day_service = DayService(
        observations=observation_repository,
        meals=meal_repository,
        medications=medication_repository,
        meal_defaults=meal_defaults_service,
    )
    medication_service = MedicationService(medication_repository)
    trends_service = TrendsService(
        observations=observation_repository,
        meals=meal_repository,
        default_period_days=resolved_settings.default_period_days,
    )

    return AppContainer(
        settings=resolved_settings,
        day_service=day_service,
        meal_defaults_service=meal_defaults_service,
        medication_service=medication_service,
        trends_service=trends_service,
    )
