"""Status rules for individual items and percentages."""

from datetime import date

from preparedness_tracker.domain.models import (
    CalculationConfig,
    InventoryItem,
    ItemStatus,
)

def days_until_expiration(item: InventoryItem, today: date) -> int | None:
    """Return calendar days until expiry, or None when the item never expires."""
    if item.never_expires or item.expiration_date is None:
        return None
    return (item.expiration_date - today).days


def item_status(
    item: InventoryItem,
    recommended_quantity: float,
    today: date,
    config: CalculationConfig,
) -> ItemStatus:
    """Classify one item.

    Expiry takes precedence over quantity; the marked-as-enough override only
    silences quantity checks.
    """
    days_left = days_until_expiration(item, today)
    if days_left is not None:
        if days_left < 0:
            return ItemStatus.CRITICAL
        if days_left <= config.expiring_soon_days:
            return ItemStatus.WARNING

    if item.marked_as_enough:
        return ItemStatus.OK
    if item.quantity == 0:
        return ItemStatus.CRITICAL
    if recommended_quantity > 0 and (
        item.quantity < recommended_quantity * config.low_quantity_warning_ratio
    ):
        return ItemStatus.WARNING
    return ItemStatus.OK


def status_from_percentage(percentage: float, config: CalculationConfig) -> ItemStatus:
    """Map a completion percentage onto a category status."""
    if percentage < config.critical_percentage_threshold:
        return ItemStatus.CRITICAL
    if percentage < config.warning_percentage_threshold:
        return ItemStatus.WARNING
    return ItemStatus.OK


def status_from_score(score: float, config: CalculationConfig) -> ItemStatus:
    """Map an overall preparedness score onto a status."""
    if score >= config.ok_score_threshold:
        return ItemStatus.OK
    if score >= config.warning_score_threshold:
        return ItemStatus.WARNING
    return ItemStatus.CRITICAL
