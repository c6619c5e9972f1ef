"""Domain models for household preparedness calculations."""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import StrEnum

CUSTOM_ITEM_TYPE = "custom"


class ItemStatus(StrEnum):
    """Traffic-light status for items and categories."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class InventoryItem:
    """Snapshot of a single inventory record."""

    id: str
    name: str
    category_id: str
    quantity: float
    unit: str
    item_type: str = CUSTOM_ITEM_TYPE
    product_template_id: str | None = None
    calories_per_unit: float | None = None
    weight_grams: float | None = None
    requires_water_liters: float | None = None
    marked_as_enough: bool = False
    expiration_date: date | None = None
    never_expires: bool = False


@dataclass(frozen=True)
class HouseholdConfig:
    """Household composition and supply target."""

    adults: int
    children: int
    supply_duration_days: int
    pets: int = 0
    use_freezer: bool = False


@dataclass(frozen=True)
class RecommendedItemDefinition:
    """Catalog entry describing a scalable recommended item."""

    id: str
    name: str
    category: str
    base_quantity: float
    unit: str
    scale_with_people: bool
    scale_with_days: bool
    scale_with_pets: bool = False
    requires_freezer: bool = False
    calories_per_unit: float | None = None
    requires_water_liters: float | None = None


@dataclass(frozen=True)
class Category:
    """Supply category."""

    id: str


@dataclass(frozen=True)
class CategoryCalculationOptions:
    """Per-call overrides for household calculations.

    ``None`` means "use the configured value".
    """

    children_multiplier: float | None = None
    daily_calories_per_person: float | None = None
    daily_water_per_person: float | None = None


@dataclass(frozen=True)
class CalculationConfig:
    """Resolved knobs for every calculation.

    Defaults:
        children_multiplier: 0.75 of an adult.
        daily_calories_per_person: 2000 kcal.
        daily_water_per_person: 3 liters.
        critical/warning percentage thresholds: 30 and 70.
        ok/warning score thresholds: 80 and 50.
        low_quantity_warning_ratio: items under half their recommendation warn.
        expiring_soon_days / backup_reminder_days: 30 days.
    """

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

    def with_options(
        self, options: CategoryCalculationOptions | None
    ) -> "CalculationConfig":
        """Return a copy with the non-empty overrides applied."""
        if options is None:
            return self
        overrides = {
            name: value
            for name, value in (
                ("children_multiplier", options.children_multiplier),
                ("daily_calories_per_person", options.daily_calories_per_person),
                ("daily_water_per_person", options.daily_water_per_person),
            )
            if value is not None
        }
        if not overrides:
            return self
        return replace(self, **overrides)


@dataclass(frozen=True)
class CategoryShortage:
    """Gap between needed and held quantity for one catalog entry."""

    item_id: str
    item_name: str
    actual: float
    needed: float
    unit: str
    missing: float


@dataclass(frozen=True)
class ShortageCalculationResult:
    """Shortages and aggregate totals for one category."""

    shortages: list[CategoryShortage] = field(default_factory=list)
    total_actual: float = 0
    total_needed: float = 0
    primary_unit: str | None = None
    total_actual_calories: float | None = None
    total_needed_calories: float | None = None
    missing_calories: float | None = None
    drinking_water_needed: float | None = None
    preparation_water_needed: float | None = None


@dataclass(frozen=True)
class CategoryStatusSummary:
    """Complete per-category output for the presentation layer."""

    category_id: str
    item_count: int
    status: ItemStatus
    completion_percentage: float
    critical_count: int
    warning_count: int
    ok_count: int
    shortages: list[CategoryShortage]
    total_actual: float
    total_needed: float
    has_recommendations: bool
    primary_unit: str | None = None
    total_actual_calories: float | None = None
    total_needed_calories: float | None = None
    missing_calories: float | None = None
    drinking_water_needed: float | None = None
    preparation_water_needed: float | None = None
