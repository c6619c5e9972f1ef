"""Household scaling math."""

import math

from preparedness_tracker.domain.models import (
    CalculationConfig,
    HouseholdConfig,
    RecommendedItemDefinition,
)


def people_multiplier(household: HouseholdConfig, config: CalculationConfig) -> float:
    """Return the weighted head count used for per-person requirements."""
    return (
        household.adults * config.adult_multiplier
        + household.children * config.children_multiplier
    )


def scale_quantity(
    entry: RecommendedItemDefinition,
    household: HouseholdConfig,
    config: CalculationConfig,
    base_quantity: float | None = None,
) -> float:
    """Apply the entry's scaling flags without rounding.

    ``base_quantity`` replaces the entry's own base amount when a category
    derives it from settings (drinking water).
    """
    qty = entry.base_quantity if base_quantity is None else base_quantity
    if entry.scale_with_people:
        qty *= people_multiplier(household, config)
    if entry.scale_with_pets:
        qty *= household.pets * config.pet_multiplier
    if entry.scale_with_days:
        qty *= household.supply_duration_days
    return qty


def recommended_quantity(
    entry: RecommendedItemDefinition,
    household: HouseholdConfig,
    config: CalculationConfig,
) -> int:
    """Return the finalised (ceiled) recommendation for an entry."""
    return math.ceil(scale_quantity(entry, household, config))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def percentage_of(actual: float, needed: float) -> int:
    """Return ``actual / needed`` as a rounded percentage, 0 when needed is 0."""
    if needed <= 0:
        return 0
    return round_half_up(actual / needed * 100)
