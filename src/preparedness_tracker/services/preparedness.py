"""Preparedness scoring."""

import math
from collections.abc import Sequence

from preparedness_tracker.domain.household import round_half_up
from preparedness_tracker.domain.matching import find_items_by_type, sum_quantity
from preparedness_tracker.domain.models import (
    CalculationConfig,
    CategoryCalculationOptions,
    CategoryStatusSummary,
    HouseholdConfig,
    InventoryItem,
    ItemStatus,
    RecommendedItemDefinition,
)
from preparedness_tracker.domain.strategies import StrategyRegistry
from preparedness_tracker.services.shortages import DEFAULT_REGISTRY, analyze_category

MAX_SCORE = 100
FULL_PREPAREDNESS = 100
EMPTY_PREPAREDNESS = 0


def calculate_preparedness_score_from_statuses(
    statuses: Sequence[CategoryStatusSummary],
) -> int:
    """Return the share of categories in ``ok`` status, 0-100."""
    if not statuses:
        return 0
    ok_count = sum(1 for status in statuses if status.status == ItemStatus.OK)
    return round_half_up(ok_count / len(statuses) * MAX_SCORE)


def calculate_category_preparedness(  # noqa: PLR0913
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_ids: Sequence[str] = (),
    options: CategoryCalculationOptions | None = None,
    config: CalculationConfig | None = None,
    registry: StrategyRegistry = DEFAULT_REGISTRY,
) -> int:
    """Return the category's completion percentage, capped at 100.

    A category without active recommendations counts as prepared as soon as
    it holds anything.
    """
    analysis = analyze_category(
        category_id,
        items,
        household,
        catalog,
        disabled_ids,
        options,
        config,
        registry,
    )
    if not analysis.has_recommendations:
        if analysis.context.category_items:
            return FULL_PREPAREDNESS
        return EMPTY_PREPAREDNESS
    return min(analysis.strategy.completion_percentage(analysis.result), MAX_SCORE)


def calculate_inventory_preparedness_score(
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
) -> int:
    """Return the legacy whole-inventory score, 0-100.

    Deprecated: the dashboard uses
    :func:`calculate_preparedness_score_from_statuses`. This variant counts
    heads without weighting children, ignores category strategies and
    matches items by type tag only.
    """
    entries = [
        entry
        for entry in catalog
        if not (entry.requires_freezer and not household.use_freezer)
    ]
    head_count = household.adults + household.children
    total_score = 0.0
    max_score = 0
    for entry in entries:
        qty = entry.base_quantity
        if entry.scale_with_people:
            qty *= head_count
        if entry.scale_with_days:
            qty *= household.supply_duration_days
        recommended = math.ceil(qty)
        if recommended == 0:
            continue
        held = sum_quantity(find_items_by_type(items, entry.id))
        total_score += min(held / recommended * MAX_SCORE, MAX_SCORE)
        max_score += MAX_SCORE

    if max_score == 0:
        return 0
    return round_half_up(total_score / max_score * MAX_SCORE)
