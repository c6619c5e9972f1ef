"""Shortage calculation for a single category."""

from collections.abc import Sequence
from dataclasses import dataclass

from preparedness_tracker.domain.matching import (
    find_matching_items,
    has_marked_as_enough,
)
from preparedness_tracker.domain.models import (
    CalculationConfig,
    CategoryCalculationOptions,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
    ShortageCalculationResult,
)
from preparedness_tracker.domain.strategies import (
    CategoryCalculationContext,
    CategoryStrategy,
    EntryResult,
    StrategyRegistry,
    build_default_registry,
)

DEFAULT_REGISTRY = build_default_registry()


@dataclass(frozen=True)
class CategoryAnalysis:
    """Shortage result together with the strategy that produced it."""

    context: CategoryCalculationContext
    strategy: CategoryStrategy
    entry_results: list[EntryResult]
    result: ShortageCalculationResult

    @property
    def has_recommendations(self) -> bool:
        return bool(self.context.active_entries)


def build_context(  # noqa: PLR0913
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_ids: Sequence[str] = (),
    options: CategoryCalculationOptions | None = None,
    config: CalculationConfig | None = None,
) -> CategoryCalculationContext:
    """Resolve options against the configuration and snapshot the inputs."""
    resolved = (config or CalculationConfig()).with_options(options)
    return CategoryCalculationContext.build(
        category_id, items, household, catalog, disabled_ids, resolved
    )


def evaluate_entries(
    context: CategoryCalculationContext, strategy: CategoryStrategy
) -> list[EntryResult]:
    """Evaluate every active entry, skipping those that recommend nothing."""
    results = []
    for entry in context.active_entries:
        recommended = strategy.recommended_quantity(entry, context)
        if recommended == 0:
            continue
        matching = find_matching_items(context.category_items, entry)
        actual = strategy.actual_amount(matching, entry, context)
        results.append(
            EntryResult(
                entry=entry,
                recommended_quantity=recommended,
                actual_quantity=actual.quantity,
                matching_items=matching,
                marked_as_enough=has_marked_as_enough(matching),
                actual_calories=actual.calories,
            )
        )
    return results


def analyze_category(  # noqa: PLR0913
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_ids: Sequence[str] = (),
    options: CategoryCalculationOptions | None = None,
    config: CalculationConfig | None = None,
    registry: StrategyRegistry = DEFAULT_REGISTRY,
) -> CategoryAnalysis:
    """Run the selected strategy over the category's active catalog entries."""
    context = build_context(
        category_id, items, household, catalog, disabled_ids, options, config
    )
    base = registry.base_strategy(category_id)
    if not context.active_entries:
        return CategoryAnalysis(
            context=context,
            strategy=base,
            entry_results=[],
            result=ShortageCalculationResult(),
        )
    results = evaluate_entries(context, base)
    strategy = registry.select(category_id, results)
    return CategoryAnalysis(
        context=context,
        strategy=strategy,
        entry_results=results,
        result=strategy.aggregate(results, context),
    )


def calculate_category_shortages(  # noqa: PLR0913
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    disabled_ids: Sequence[str] = (),
    options: CategoryCalculationOptions | None = None,
    config: CalculationConfig | None = None,
    registry: StrategyRegistry = DEFAULT_REGISTRY,
) -> ShortageCalculationResult:
    """Return shortages and totals for one category.

    A category without active catalog entries yields an empty result.
    """
    return analyze_category(
        category_id,
        items,
        household,
        catalog,
        disabled_ids,
        options,
        config,
        registry,
    ).result
