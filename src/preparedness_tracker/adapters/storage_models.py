"""Pydantic models for rows read from Supabase tables."""

import logging
from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from preparedness_tracker.domain.backup import BackupReminderState
from preparedness_tracker.domain.calories import calories_from_weight
from preparedness_tracker.domain.models import (
    CUSTOM_ITEM_TYPE,
    CategoryCalculationOptions,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
)

_logger = logging.getLogger(__name__)


def _parse_date_or_none(value: object) -> date | None:
    """Return a calendar date, or None for empty or malformed values."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            _logger.warning("Ignoring malformed stored date: %r", value)
            return None
    _logger.warning("Ignoring malformed stored date: %r", value)
    return None


def _parse_datetime_or_none(value: object) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            _logger.warning("Ignoring malformed stored timestamp: %r", value)
            return None
    _logger.warning("Ignoring malformed stored timestamp: %r", value)
    return None


class BackupStateRow(BaseModel):
    """Row of the ``backup_state`` table."""

    last_backup_date: date | None = None
    last_modified: datetime | None = None
    dismissed_until: date | None = None

    @field_validator("last_backup_date", "dismissed_until", mode="before")
    @classmethod
    def _dates(cls, value: object) -> date | None:
        return _parse_date_or_none(value)

    @field_validator("last_modified", mode="before")
    @classmethod
    def _timestamps(cls, value: object) -> datetime | None:
        return _parse_datetime_or_none(value)

    def to_domain(self) -> BackupReminderState:
        return BackupReminderState(
            last_backup_date=self.last_backup_date,
            last_modified=self.last_modified,
            dismissed_until=self.dismissed_until,
        )


class HouseholdRow(BaseModel):
    """Row of the ``households`` table."""

    adults: int = Field(default=0, ge=0)
    children: int = Field(default=0, ge=0)
    pets: int = Field(default=0, ge=0)
    supply_duration_days: int = Field(default=0, ge=0)
    use_freezer: bool = False
    children_multiplier: float | None = None
    daily_calories_per_person: float | None = None
    daily_water_per_person: float | None = None
    disabled_recommendations: str | None = None

    def to_household(self) -> HouseholdConfig:
        return HouseholdConfig(
            adults=self.adults,
            children=self.children,
            pets=self.pets,
            supply_duration_days=self.supply_duration_days,
            use_freezer=self.use_freezer,
        )

    def to_options(self) -> CategoryCalculationOptions:
        return CategoryCalculationOptions(
            children_multiplier=self.children_multiplier,
            daily_calories_per_person=self.daily_calories_per_person,
            daily_water_per_person=self.daily_water_per_person,
        )


class InventoryItemRow(BaseModel):
    """Row of the ``inventory_items`` table."""

    id: str
    name: str
    category_id: str
    quantity: float = Field(default=0, ge=0)
    unit: str
    item_type: str = CUSTOM_ITEM_TYPE
    product_template_id: str | None = None
    calories_per_unit: float | None = None
    weight_grams: float | None = None
    calories_per_100g: float | None = None
    requires_water_liters: float | None = None
    marked_as_enough: bool = False
    expiration_date: date | None = None
    never_expires: bool = False

    @field_validator("expiration_date", mode="before")
    @classmethod
    def _expiration(cls, value: object) -> date | None:
        return _parse_date_or_none(value)

    def to_domain(self) -> InventoryItem:
        values = self.model_dump(exclude={"calories_per_100g"})
        if (
            values["calories_per_unit"] is None
            and self.calories_per_100g is not None
            and self.weight_grams
        ):
            values["calories_per_unit"] = calories_from_weight(
                self.weight_grams, self.calories_per_100g
            )
        return InventoryItem(**values)


class RecommendedItemRow(BaseModel):
    """Row of the ``recommended_items`` table."""

    id: str
    name: str
    category: str
    base_quantity: float
    unit: str
    scale_with_people: bool = False
    scale_with_days: bool = False
    scale_with_pets: bool = False
    requires_freezer: bool = False
    calories_per_unit: float | None = None
    requires_water_liters: float | None = None

    def to_domain(self) -> RecommendedItemDefinition:
        return RecommendedItemDefinition(**self.model_dump())
