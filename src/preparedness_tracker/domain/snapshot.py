"""Input snapshot for a household's dashboard."""

from dataclasses import dataclass, field

from preparedness_tracker.domain.models import (
    Category,
    CategoryCalculationOptions,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
)


@dataclass(frozen=True)
class HouseholdSnapshot:
    """Everything read from storage for one dashboard calculation."""

    household: HouseholdConfig
    categories: list[Category]
    items: list[InventoryItem] = field(default_factory=list)
    catalog: list[RecommendedItemDefinition] = field(default_factory=list)
    disabled_ids: list[str] = field(default_factory=list)
    options: CategoryCalculationOptions = field(
        default_factory=CategoryCalculationOptions
    )
