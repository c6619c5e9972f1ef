"""Category calculation strategies.

Each category reconciles its inventory against the catalog through one
strategy: plain quantities, calories (food), drinking plus preparation water,
or weighted fulfilment when units cannot be summed. ``StrategyRegistry`` maps
category ids to strategies and picks the weighted variant per call.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Protocol

from preparedness_tracker.domain.calories import (
    item_calories_for_entry,
    item_total_calories,
)
from preparedness_tracker.domain.household import (
    people_multiplier,
    percentage_of,
    scale_quantity,
)
from preparedness_tracker.domain.matching import item_matches_entry, sum_quantity
from preparedness_tracker.domain.models import (
    CalculationConfig,
    CategoryShortage,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
    ShortageCalculationResult,
)
from preparedness_tracker.domain.water import (
    WaterNeeds,
    preparation_water_required,
    total_water_needs,
)

FOOD_CATEGORY_ID = "food"
WATER_CATEGORY_ID = "water-beverages"
COMMUNICATION_CATEGORY_ID = "communication-info"
DRINKING_WATER_ITEM_ID = "bottled-water"
LITERS_UNIT = "liters"


@dataclass(frozen=True)
class CategoryCalculationContext:
    """Everything a strategy may read while evaluating one category."""

    category_id: str
    items: Sequence[InventoryItem]
    category_items: list[InventoryItem]
    active_entries: list[RecommendedItemDefinition]
    catalog: Sequence[RecommendedItemDefinition]
    disabled_ids: frozenset[str]
    household: HouseholdConfig
    config: CalculationConfig
    people_multiplier: float

    @classmethod
    def build(
        cls,
        category_id: str,
        items: Sequence[InventoryItem],
        household: HouseholdConfig,
        catalog: Sequence[RecommendedItemDefinition],
        disabled_ids: Sequence[str],
        config: CalculationConfig,
    ) -> "CategoryCalculationContext":
        disabled = frozenset(disabled_ids)
        return cls(
            category_id=category_id,
            items=items,
            category_items=[item for item in items if item.category_id == category_id],
            active_entries=[
                entry
                for entry in catalog
                if entry.category == category_id and entry.id not in disabled
            ],
            catalog=catalog,
            disabled_ids=disabled,
            household=household,
            config=config,
            people_multiplier=people_multiplier(household, config),
        )


@dataclass(frozen=True)
class ActualAmount:
    """Held amount for one catalog entry."""

    quantity: float
    calories: float | None = None


@dataclass(frozen=True)
class EntryResult:
    """Evaluation of a single catalog entry against the inventory."""

    entry: RecommendedItemDefinition
    recommended_quantity: float
    actual_quantity: float
    matching_items: list[InventoryItem]
    marked_as_enough: bool
    actual_calories: float | None = None

    @property
    def unit(self) -> str:
        return self.entry.unit

    @property
    def missing(self) -> float:
        return max(0.0, self.recommended_quantity - self.actual_quantity)

    @property
    def fulfillment_ratio(self) -> float:
        if self.marked_as_enough or self.recommended_quantity == 0:
            return 1.0
        return min(self.actual_quantity / self.recommended_quantity, 1.0)


class CategoryStrategy(Protocol):
    """Capability interface every category strategy implements."""

    supports_mixed_units: bool

    def recommended_quantity(
        self, entry: RecommendedItemDefinition, context: CategoryCalculationContext
    ) -> int:
        """Return the finalised recommendation for one entry."""

    def actual_amount(
        self,
        matching_items: list[InventoryItem],
        entry: RecommendedItemDefinition,
        context: CategoryCalculationContext,
    ) -> ActualAmount:
        """Return the held amount credited to one entry."""

    def aggregate(
        self, results: list[EntryResult], context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        """Fold entry results into category totals and shortages."""

    def has_enough(self, result: ShortageCalculationResult) -> bool:
        """Return True when the category's requirement is met."""

    def completion_percentage(self, result: ShortageCalculationResult) -> int:
        """Return the uncapped completion percentage for the result."""

    def baseline(
        self, context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        """Return the intrinsic result for a category without active entries."""


def build_shortages(results: list[EntryResult]) -> list[CategoryShortage]:
    """Return shortages for unfulfilled entries, largest gap first."""
    shortages = [
        CategoryShortage(
            item_id=result.entry.id,
            item_name=result.entry.name,
            actual=result.actual_quantity,
            needed=result.recommended_quantity,
            unit=result.unit,
            missing=result.missing,
        )
        for result in results
        if result.missing > 0 and not result.marked_as_enough
    ]
    # sorted() is stable, ties keep catalog order
    return sorted(shortages, key=lambda shortage: shortage.missing, reverse=True)


def primary_unit(results: list[EntryResult]) -> str | None:
    """Return the unit carrying the largest cumulative recommendation."""
    weights: dict[str, float] = {}
    for result in results:
        weights[result.unit] = weights.get(result.unit, 0) + result.recommended_quantity
    best_unit = None
    best_weight = 0.0
    for unit, weight in weights.items():
        if weight > best_weight:
            best_unit, best_weight = unit, weight
    return best_unit


def has_mixed_units(results: list[EntryResult]) -> bool:
    return len({result.unit for result in results}) > 1


class QuantityStrategy:
    """Sums raw quantities for single-unit categories."""

    supports_mixed_units = True

    def recommended_quantity(
        self, entry: RecommendedItemDefinition, context: CategoryCalculationContext
    ) -> int:
        return math.ceil(scale_quantity(entry, context.household, context.config))

    def actual_amount(
        self,
        matching_items: list[InventoryItem],
        entry: RecommendedItemDefinition,
        context: CategoryCalculationContext,
    ) -> ActualAmount:
        return ActualAmount(quantity=sum_quantity(matching_items))

    def aggregate(
        self, results: list[EntryResult], context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        return ShortageCalculationResult(
            shortages=build_shortages(results),
            total_actual=sum((result.actual_quantity for result in results), 0.0),
            total_needed=sum((result.recommended_quantity for result in results), 0.0),
            primary_unit=primary_unit(results),
        )

    def has_enough(self, result: ShortageCalculationResult) -> bool:
        if result.total_needed == 0:
            return False
        return result.total_actual >= result.total_needed

    def completion_percentage(self, result: ShortageCalculationResult) -> int:
        return percentage_of(result.total_actual, result.total_needed)

    def baseline(
        self, context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        return ShortageCalculationResult()


class CalorieStrategy(QuantityStrategy):
    """Food: completion is measured in calories, not item counts."""

    supports_mixed_units = False

    def actual_amount(
        self,
        matching_items: list[InventoryItem],
        entry: RecommendedItemDefinition,
        context: CategoryCalculationContext,
    ) -> ActualAmount:
        calories = sum(
            (item_calories_for_entry(item, entry) for item in matching_items), 0.0
        )
        return ActualAmount(quantity=sum_quantity(matching_items), calories=calories)

    def aggregate(
        self, results: list[EntryResult], context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        needed_calories = self.needed_calories(context)
        actual_calories = sum(
            (result.actual_calories or 0 for result in results), 0.0
        ) + self._unlinked_calories(results, context)
        base = super().aggregate(results, context)
        return replace(
            base,
            total_actual_calories=actual_calories,
            total_needed_calories=needed_calories,
            missing_calories=max(0.0, needed_calories - actual_calories),
        )

    def has_enough(self, result: ShortageCalculationResult) -> bool:
        needed = result.total_needed_calories or 0
        if needed == 0:
            return False
        return (result.total_actual_calories or 0) >= needed

    def completion_percentage(self, result: ShortageCalculationResult) -> int:
        return percentage_of(
            result.total_actual_calories or 0, result.total_needed_calories or 0
        )

    def baseline(
        self, context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        return self.aggregate([], context)

    @staticmethod
    def needed_calories(context: CategoryCalculationContext) -> float:
        return (
            context.config.daily_calories_per_person
            * context.people_multiplier
            * context.household.supply_duration_days
        )

    @staticmethod
    def _unlinked_calories(
        results: list[EntryResult], context: CategoryCalculationContext
    ) -> float:
        """Calories held in food items that no evaluated entry accounted for.

        Items with their own calories-per-unit count directly; items tagged
        with a disabled entry borrow that entry's calorie value.
        """
        evaluated = [result.entry for result in results]
        disabled_entries = {
            entry.id: entry
            for entry in context.catalog
            if entry.id in context.disabled_ids and entry.calories_per_unit
        }
        calories = 0.0
        for item in context.category_items:
            if any(item_matches_entry(item, entry) for entry in evaluated):
                continue
            if item.calories_per_unit:
                calories += item_total_calories(item)
            elif item.item_type in disabled_entries:
                calories += item_calories_for_entry(
                    item, disabled_entries[item.item_type]
                )
        return calories


class WaterStrategy(QuantityStrategy):
    """Drinking water scaled from settings plus water to prepare stored food."""

    def recommended_quantity(
        self, entry: RecommendedItemDefinition, context: CategoryCalculationContext
    ) -> int:
        if entry.id != DRINKING_WATER_ITEM_ID:
            return super().recommended_quantity(entry, context)
        qty = scale_quantity(
            entry,
            context.household,
            context.config,
            base_quantity=context.config.daily_water_per_person,
        )
        qty += preparation_water_required(context.items, context.catalog)
        return math.ceil(qty)

    def aggregate(
        self, results: list[EntryResult], context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        needs = self._water_needs(context)
        return replace(
            super().aggregate(results, context),
            drinking_water_needed=needs.drinking_water,
            preparation_water_needed=needs.preparation_water,
        )

    def baseline(
        self, context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        needs = self._water_needs(context)
        held = sum_quantity(
            item for item in context.category_items if item.unit == LITERS_UNIT
        )
        return ShortageCalculationResult(
            total_actual=held,
            total_needed=math.ceil(needs.total_water),
            primary_unit=LITERS_UNIT,
            drinking_water_needed=needs.drinking_water,
            preparation_water_needed=needs.preparation_water,
        )

    @staticmethod
    def _water_needs(context: CategoryCalculationContext) -> WaterNeeds:
        return total_water_needs(
            context.items, context.household, context.catalog, context.config
        )


@dataclass(frozen=True)
class WeightedFulfillmentStrategy:
    """Counts entries instead of summing quantities.

    Each entry contributes a 0-1 fulfilment ratio, so totals read as "X of Y
    items" and the percentage always agrees with that display. Per-entry
    quantities still come from the wrapped strategy.
    """

    base: CategoryStrategy
    supports_mixed_units: bool = True

    def recommended_quantity(
        self, entry: RecommendedItemDefinition, context: CategoryCalculationContext
    ) -> int:
        return self.base.recommended_quantity(entry, context)

    def actual_amount(
        self,
        matching_items: list[InventoryItem],
        entry: RecommendedItemDefinition,
        context: CategoryCalculationContext,
    ) -> ActualAmount:
        return self.base.actual_amount(matching_items, entry, context)

    def aggregate(
        self, results: list[EntryResult], context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        return replace(
            self.base.aggregate(results, context),
            total_actual=sum((result.fulfillment_ratio for result in results), 0.0),
            total_needed=len(results),
            primary_unit=None,
        )

    def has_enough(self, result: ShortageCalculationResult) -> bool:
        if result.total_needed == 0:
            return False
        return result.total_actual >= result.total_needed

    def completion_percentage(self, result: ShortageCalculationResult) -> int:
        return percentage_of(result.total_actual, result.total_needed)

    def baseline(
        self, context: CategoryCalculationContext
    ) -> ShortageCalculationResult:
        return self.base.baseline(context)


@dataclass(frozen=True)
class StrategyRegistry:
    """Category id to strategy lookup."""

    default: CategoryStrategy
    by_category: dict[str, CategoryStrategy] = field(default_factory=dict)
    item_type_categories: frozenset[str] = frozenset()

    def base_strategy(self, category_id: str) -> CategoryStrategy:
        """Return the strategy computing per-entry quantities for a category."""
        return self.by_category.get(category_id, self.default)

    def select(
        self, category_id: str, results: list[EntryResult]
    ) -> CategoryStrategy:
        """Return the strategy aggregating this call's entry results.

        Mixed units are detected from the entries evaluated in this call, so
        disabling recommendations can switch a category to weighted totals.
        """
        base = self.base_strategy(category_id)
        if category_id in self.item_type_categories:
            return WeightedFulfillmentStrategy(base)
        if base.supports_mixed_units and has_mixed_units(results):
            return WeightedFulfillmentStrategy(base)
        return base

    def tracks_intrinsic_need(self, category_id: str) -> bool:
        """Food and water carry a per-person need even without catalog entries."""
        return isinstance(
            self.base_strategy(category_id), CalorieStrategy | WaterStrategy
        )


def build_default_registry() -> StrategyRegistry:
    """Build the standard category lookup."""
    return StrategyRegistry(
        default=QuantityStrategy(),
        by_category={
            FOOD_CATEGORY_ID: CalorieStrategy(),
            WATER_CATEGORY_ID: WaterStrategy(),
        },
        item_type_categories=frozenset({COMMUNICATION_CATEGORY_ID}),
    )
