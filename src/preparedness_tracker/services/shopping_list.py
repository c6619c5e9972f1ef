"""Shopping list built from category shortages."""

from collections.abc import Sequence
from dataclasses import dataclass

from preparedness_tracker.domain.models import CategoryStatusSummary


@dataclass(frozen=True)
class ShoppingListEntry:
    """One line of the shopping list."""

    category_id: str
    item_id: str
    item_name: str
    missing: float
    unit: str


def build_shopping_list(
    statuses: Sequence[CategoryStatusSummary],
) -> list[ShoppingListEntry]:
    """Flatten shortages, grouped by category id, largest gap first within each."""
    entries = []
    for summary in sorted(statuses, key=lambda status: status.category_id):
        entries.extend(
            ShoppingListEntry(
                category_id=summary.category_id,
                item_id=shortage.item_id,
                item_name=shortage.item_name,
                missing=shortage.missing,
                unit=shortage.unit,
            )
            for shortage in summary.shortages
        )
    return entries
