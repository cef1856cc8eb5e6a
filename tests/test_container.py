"""Tests for container wiring."""

from health_diary.adapters.supabase_observation_repository import (
    SupabaseObservationRepository,
)
from health_diary.config import parse_origins
from health_diary.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.day_service is not None
    assert container.trends_service.default_period_days == 7
    assert isinstance(
        container.trends_service.observations, SupabaseObservationRepository
    )
    assert container.day_service.meal_defaults is container.meal_defaults_service


def test_parse_origins() -> None:
    assert parse_origins("*") == ["*"]
    assert parse_origins("https://a.example, https://b.example,") == [
        "https://a.example",
        "https://b.example",
    ]
    assert parse_origins(None) == []
