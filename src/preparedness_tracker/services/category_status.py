"""Category status aggregation for the dashboard."""

from collections.abc import Mapping, Sequence
from datetime import date

from preparedness_tracker.domain.household import percentage_of
from preparedness_tracker.domain.item_status import item_status, status_from_percentage
from preparedness_tracker.domain.matching import item_matches_entry
from preparedness_tracker.domain.models import (
    CalculationConfig,
    Category,
    CategoryCalculationOptions,
    CategoryStatusSummary,
    HouseholdConfig,
    InventoryItem,
    ItemStatus,
    RecommendedItemDefinition,
)
from preparedness_tracker.domain.strategies import (
    CategoryCalculationContext,
    CategoryStrategy,
    StrategyRegistry,
)
from preparedness_tracker.services.shortages import DEFAULT_REGISTRY, analyze_category


def item_recommended_quantity(
    item: InventoryItem,
    context: CategoryCalculationContext,
    strategy: CategoryStrategy,
) -> int:
    """Return the recommendation of the first active entry the item counts toward."""
    for entry in context.active_entries:
        if item_matches_entry(item, entry):
            return strategy.recommended_quantity(entry, context)
    return 0


def count_item_statuses(
    context: CategoryCalculationContext, strategy: CategoryStrategy, today: date
) -> dict[ItemStatus, int]:
    """Tally the individual status of every item in the category."""
    counts = {status: 0 for status in ItemStatus}
    for item in context.category_items:
        recommended = item_recommended_quantity(item, context, strategy)
        if recommended > 0:
            status = item_status(item, recommended, today, context.config)
        elif item.quantity == 0:
            status = ItemStatus.CRITICAL
        else:
            status = ItemStatus.OK
        counts[status] += 1
    return counts


def resolve_status(
    has_enough: bool,
    counts: Mapping[ItemStatus, int],
    effective_percentage: float,
    config: CalculationConfig,
) -> ItemStatus:
    """Fold the sufficiency override, item statuses and percentage into one status."""
    if has_enough:
        return ItemStatus.OK
    from_percentage = status_from_percentage(effective_percentage, config)
    if counts[ItemStatus.CRITICAL] > 0 or from_percentage == ItemStatus.CRITICAL:
        return ItemStatus.CRITICAL
    if counts[ItemStatus.WARNING] > 0 or from_percentage == ItemStatus.WARNING:
        return ItemStatus.WARNING
    return ItemStatus.OK


def calculate_category_status(  # noqa: PLR0913
    category: Category,
    items: Sequence[InventoryItem],
    completion_percentage: float,
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_ids: Sequence[str] = (),
    options: CategoryCalculationOptions | None = None,
    config: CalculationConfig | None = None,
    today: date | None = None,
    registry: StrategyRegistry = DEFAULT_REGISTRY,
) -> CategoryStatusSummary:
    """Calculate the authoritative status summary for one category.

    ``completion_percentage`` normally comes from the preparedness scorer.
    It is overridden whenever the category reports item counts instead of a
    unit, so the percentage always matches the displayed ratio. Categories
    without active recommendations are treated as satisfied, except food and
    water which are measured against their per-person need.
    """
    analysis = analyze_category(
        category.id,
        items,
        household,
        catalog,
        disabled_ids,
        options,
        config,
        registry,
    )
    context = analysis.context
    counts = count_item_statuses(context, analysis.strategy, today or date.today())

    result = analysis.result
    effective_percentage = completion_percentage
    if analysis.has_recommendations:
        has_enough = analysis.strategy.has_enough(result)
    elif registry.tracks_intrinsic_need(category.id):
        result = analysis.strategy.baseline(context)
        has_enough = analysis.strategy.has_enough(result)
        effective_percentage = analysis.strategy.completion_percentage(result)
    else:
        has_enough = True

    if result.primary_unit is None and result.total_needed > 0:
        effective_percentage = percentage_of(result.total_actual, result.total_needed)

    status = resolve_status(has_enough, counts, effective_percentage, context.config)
    final_percentage = 100 if has_enough else min(max(effective_percentage, 0), 100)

    return CategoryStatusSummary(
        category_id=category.id,
        item_count=len(context.category_items),
        status=status,
        completion_percentage=final_percentage,
        critical_count=counts[ItemStatus.CRITICAL],
        warning_count=counts[ItemStatus.WARNING],
        ok_count=counts[ItemStatus.OK],
        shortages=result.shortages,
        total_actual=result.total_actual,
        total_needed=result.total_needed,
        has_recommendations=analysis.has_recommendations,
        primary_unit=result.primary_unit,
        total_actual_calories=result.total_actual_calories,
        total_needed_calories=result.total_needed_calories,
        missing_calories=result.missing_calories,
        drinking_water_needed=result.drinking_water_needed,
        preparation_water_needed=result.preparation_water_needed,
    )


def calculate_all_category_statuses(  # noqa: PLR0913
    categories: Sequence[Category],
    items: Sequence[InventoryItem],
    preparedness_by_category: Mapping[str, float],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_ids: Sequence[str] = (),
    options: CategoryCalculationOptions | None = None,
    config: CalculationConfig | None = None,
    today: date | None = None,
    registry: StrategyRegistry = DEFAULT_REGISTRY,
) -> list[CategoryStatusSummary]:
    """Calculate summaries for every category, in the given order."""
    resolved_today = today or date.today()
    return [
        calculate_category_status(
            category,
            items,
            preparedness_by_category.get(category.id, 0),
            household,
            catalog,
            disabled_ids,
            options,
            config,
            resolved_today,
            registry,
        )
        for category in categories
    ]
