"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from preparedness_tracker.domain.models import CalculationConfig

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    children_multiplier: float = 0.75
    daily_calories_per_person: float = 2000
    daily_water_per_person: float = 3
    adult_multiplier: float = 1.0
    pet_multiplier: float = 1.0
    critical_percentage_threshold: float = 30
    warning_percentage_threshold: float = 70
    ok_score_threshold: float = 80
    warning_score_threshold: float = 50
    low_quantity_warning_ratio: float = 0.5
    expiring_soon_days: int = 30
    backup_reminder_days: int = 30
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def calculation_config(self) -> CalculationConfig:
        """Return the engine configuration built from these settings."""
        return CalculationConfig(
            children_multiplier=self.children_multiplier,
            daily_calories_per_person=self.daily_calories_per_person,
            daily_water_per_person=self.daily_water_per_person,
            adult_multiplier=self.adult_multiplier,
            pet_multiplier=self.pet_multiplier,
            critical_percentage_threshold=self.critical_percentage_threshold,
            warning_percentage_threshold=self.warning_percentage_threshold,
            ok_score_threshold=self.ok_score_threshold,
            warning_score_threshold=self.warning_score_threshold,
            low_quantity_warning_ratio=self.low_quantity_warning_ratio,
            expiring_soon_days=self.expiring_soon_days,
            backup_reminder_days=self.backup_reminder_days,
        )


def parse_disabled_ids(raw: str | None) -> list[str]:
    """Parse a comma-separated list of disabled recommendation ids."""
    if raw is None:
        return []
    ids: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in ids:
            ids.append(value)
    return ids
