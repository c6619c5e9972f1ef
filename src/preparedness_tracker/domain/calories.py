"""Calorie math for food items."""

import math

from preparedness_tracker.domain.household import round_half_up
from preparedness_tracker.domain.models import InventoryItem, RecommendedItemDefinition

CALORIE_BASE_WEIGHT_GRAMS = 100
GRAMS_PER_KILOGRAM = 1000
KILOGRAMS_UNIT = "kilograms"


def calories_from_weight(weight_grams: float, calories_per_100g: float) -> int:
    """Return calories per unit from unit weight and calories per 100 g."""
    return round_half_up(weight_grams / CALORIE_BASE_WEIGHT_GRAMS * calories_per_100g)


def total_calories(
    quantity: float,
    calories_per_unit: float,
    unit: str | None = None,
    weight_grams: float | None = None,
) -> int:
    """Return calories for a quantity.

    Kilogram quantities are converted to units through the per-unit weight.
    """
    if unit == KILOGRAMS_UNIT and weight_grams and weight_grams > 0:
        units = quantity * GRAMS_PER_KILOGRAM / weight_grams
        return round_half_up(units * calories_per_unit)
    return round_half_up(quantity * calories_per_unit)


def _usable(value: float | None) -> bool:
    return value is not None and math.isfinite(value)


def item_total_calories(item: InventoryItem) -> int:
    """Return calories from the item's own calories-per-unit, or 0."""
    if not _usable(item.calories_per_unit) or not item.calories_per_unit:
        return 0
    return total_calories(
        item.quantity, item.calories_per_unit, item.unit, item.weight_grams
    )


def item_calories_for_entry(
    item: InventoryItem, entry: RecommendedItemDefinition | None
) -> float:
    """Return calories for an item, preferring its override over the catalog value."""
    if _usable(item.calories_per_unit) and item.calories_per_unit:
        return item_total_calories(item)
    if entry is not None and _usable(entry.calories_per_unit):
        return item.quantity * (entry.calories_per_unit or 0)
    return 0
