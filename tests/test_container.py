"""Tests for container wiring."""

import pytest

from preparedness_tracker.config import Settings
from preparedness_tracker.containers import build_container
from tests.test_supabase_adapters import FakeSupabaseClient


def test_build_container_creates_services(settings, monkeypatch) -> None:
    created = {}

    def fake_create_client(url: str, key: str) -> FakeSupabaseClient:
        created["args"] = (url, key)
        return FakeSupabaseClient({})

    monkeypatch.setattr(
        "preparedness_tracker.containers.create_client", fake_create_client
    )

    container = build_container(settings)

    assert created["args"] == ("https://example.supabase.co", "service-key")
    assert container.preparedness_service is not None
    assert container.backup_reminder_service.threshold_days == 30


def test_build_container_passes_calculation_settings(monkeypatch) -> None:
    monkeypatch.setattr(
        "preparedness_tracker.containers.create_client",
        lambda url, key: FakeSupabaseClient({}),
    )
    settings = Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        daily_water_per_person=4,
        backup_reminder_days=14,
        debug=True,
    )

    container = build_container(settings)

    assert container.preparedness_service.config.daily_water_per_person == 4
    assert container.preparedness_service.debug
    assert container.backup_reminder_service.threshold_days == 14


def test_build_container_requires_supabase_credentials() -> None:
    with pytest.raises(ValueError, match="Supabase"):
        build_container(Settings(supabase_url=None, supabase_service_key=None))
