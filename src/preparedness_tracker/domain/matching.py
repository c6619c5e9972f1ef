"""Matching inventory records against catalog entries."""

import re
from collections.abc import Iterable

from preparedness_tracker.domain.models import (
    CUSTOM_ITEM_TYPE,
    InventoryItem,
    RecommendedItemDefinition,
)

_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Case-fold a display name and collapse whitespace runs to hyphens."""
    return _WHITESPACE.sub("-", name.casefold())


def matches_by_link(item: InventoryItem, entry_id: str) -> bool:
    """Return True when the item is linked to the entry by template or type tag."""
    return item.product_template_id == entry_id or item.item_type == entry_id


def matches_by_legacy_name(item: InventoryItem, entry_id: str) -> bool:
    """Name fallback for records created before catalog linking existed.

    Only typed, unlinked items qualify. Custom items are never credited by
    name, whatever the user typed.
    """
    if item.product_template_id is not None or item.item_type == CUSTOM_ITEM_TYPE:
        return False
    return normalize_name(item.name) == entry_id.casefold()


def item_matches_entry(item: InventoryItem, entry: RecommendedItemDefinition) -> bool:
    """Return True when the item counts toward the catalog entry."""
    return matches_by_link(item, entry.id) or matches_by_legacy_name(item, entry.id)


def find_matching_items(
    items: Iterable[InventoryItem], entry: RecommendedItemDefinition
) -> list[InventoryItem]:
    """Return the items counting toward the entry, in input order."""
    return [item for item in items if item_matches_entry(item, entry)]


def find_items_by_type(
    items: Iterable[InventoryItem], entry_id: str
) -> list[InventoryItem]:
    """Strict lookup by type tag only."""
    return [item for item in items if item.item_type == entry_id]


def has_marked_as_enough(items: Iterable[InventoryItem]) -> bool:
    """Return True when any of the items carries the user's override."""
    return any(item.marked_as_enough for item in items)


def sum_quantity(items: Iterable[InventoryItem]) -> float:
    return sum((item.quantity for item in items), 0.0)
