"""Water requirement math, including water needed to prepare stored food."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from preparedness_tracker.domain.household import people_multiplier
from preparedness_tracker.domain.matching import normalize_name
from preparedness_tracker.domain.models import (
    CalculationConfig,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
)


@dataclass(frozen=True)
class WaterNeeds:
    """Drinking and preparation water, in liters."""

    drinking_water: float
    preparation_water: float

    @property
    def total_water(self) -> float:
        return self.drinking_water + self.preparation_water


def _positive(value: float | None) -> bool:
    return value is not None and value > 0


def water_per_unit(
    item: InventoryItem, catalog: Sequence[RecommendedItemDefinition]
) -> float:
    """Return liters needed to prepare one unit of the item.

    The item's own value wins; otherwise the catalog entry it is linked to,
    by template id first and type tag second.
    """
    if _positive(item.requires_water_liters):
        return item.requires_water_liters  # type: ignore[return-value]
    candidates = []
    if item.product_template_id:
        candidates.append(item.product_template_id)
    if item.item_type:
        candidates.append(normalize_name(item.item_type))
    for candidate in candidates:
        for entry in catalog:
            if entry.id == candidate and _positive(entry.requires_water_liters):
                return entry.requires_water_liters  # type: ignore[return-value]
    return 0


def preparation_water_required(
    items: Iterable[InventoryItem], catalog: Sequence[RecommendedItemDefinition]
) -> float:
    """Return total liters needed to prepare every stored item."""
    return sum((water_per_unit(item, catalog) * item.quantity for item in items), 0.0)


def drinking_water_required(
    household: HouseholdConfig, config: CalculationConfig
) -> float:
    """Return the baseline drinking-water need in liters."""
    return (
        config.daily_water_per_person
        * people_multiplier(household, config)
        * household.supply_duration_days
    )


def total_water_needs(
    items: Iterable[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    config: CalculationConfig,
) -> WaterNeeds:
    return WaterNeeds(
        drinking_water=drinking_water_required(household, config),
        preparation_water=preparation_water_required(items, catalog),
    )
