"""Tests for application settings."""

from preparedness_tracker.config import Settings, parse_disabled_ids
from preparedness_tracker.domain.models import CalculationConfig


def test_default_settings_match_calculation_defaults(settings) -> None:
    assert settings.calculation_config() == CalculationConfig()


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DAILY_WATER_PER_PERSON", "4")
    monkeypatch.setenv("CRITICAL_PERCENTAGE_THRESHOLD", "25")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("OK_SCORE_THRESHOLD", "90")

    settings = Settings()
    config = settings.calculation_config()

    assert settings.debug
    assert config.daily_water_per_person == 4
    assert config.critical_percentage_threshold == 25
    assert config.children_multiplier == 0.75
    assert config.ok_score_threshold == 90
    assert config.warning_score_threshold == 50


def test_parse_disabled_ids() -> None:
    assert parse_disabled_ids(None) == []
    assert parse_disabled_ids("") == []
    assert parse_disabled_ids(" radio , candles,radio,, ") == ["radio", "candles"]
