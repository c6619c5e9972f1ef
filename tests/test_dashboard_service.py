"""Tests for the dashboard service and shopping list."""

import logging
from uuid import uuid4

import pytest

from preparedness_tracker.domain.models import (
    CalculationConfig,
    Category,
    CategoryCalculationOptions,
    ItemStatus,
)
from preparedness_tracker.domain.snapshot import HouseholdSnapshot
from preparedness_tracker.services.dashboard import PreparednessService
from preparedness_tracker.services.shopping_list import build_shopping_list
from tests.conftest import (
    TODAY,
    InMemorySnapshotRepository,
    bottled_water_entry,
    make_entry,
    make_item,
)


def _snapshot(household, **overrides) -> HouseholdSnapshot:
    values = {
        "household": household,
        "categories": [
            Category("water-beverages"),
            Category("tools-supplies"),
            Category("medical"),
        ],
        "items": [
            make_item(id="1", item_type="flashlight", quantity=2),
            make_item(
                id="2", category_id="medical", item_type="bandages", quantity=2
            ),
        ],
        "catalog": [
            bottled_water_entry(),
            make_entry(id="flashlight", base_quantity=2),
            make_entry(id="bandages", category="medical", base_quantity=10),
            make_entry(id="gloves", category="medical", base_quantity=4),
        ],
    }
    values.update(overrides)
    return HouseholdSnapshot(**values)


def test_dashboard_combines_statuses_score_and_shopping_list(two_adults) -> None:
    household_id = uuid4()
    repository = InMemorySnapshotRepository({household_id: _snapshot(two_adults)})
    service = PreparednessService(repository=repository)

    summary = service.get_dashboard(household_id, today=TODAY)

    statuses = {status.category_id: status.status for status in summary.statuses}
    assert statuses == {
        "water-beverages": ItemStatus.CRITICAL,
        "tools-supplies": ItemStatus.OK,
        "medical": ItemStatus.CRITICAL,
    }
    assert summary.score == 33
    assert summary.score_status == ItemStatus.CRITICAL
    shopping = [(entry.category_id, entry.item_id) for entry in summary.shopping_list]
    assert shopping == [
        ("medical", "bandages"),
        ("medical", "gloves"),
        ("water-beverages", "bottled-water"),
    ]


def test_dashboard_honours_disabled_ids_and_options(two_adults) -> None:
    household_id = uuid4()
    snapshot = _snapshot(
        two_adults,
        disabled_ids=["gloves"],
        options=CategoryCalculationOptions(daily_water_per_person=1),
        items=[
            make_item(id="1", item_type="flashlight", quantity=2),
            make_item(
                id="2", category_id="medical", item_type="bandages", quantity=10
            ),
            make_item(
                id="3",
                category_id="water-beverages",
                item_type="bottled-water",
                quantity=6,
                unit="liters",
            ),
        ],
    )
    service = PreparednessService(
        repository=InMemorySnapshotRepository({household_id: snapshot})
    )

    summary = service.get_dashboard(household_id, today=TODAY)

    assert summary.score == 100
    assert summary.score_status == ItemStatus.OK
    assert summary.shopping_list == []


def test_dashboard_logs_in_debug_mode(two_adults, caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("preparedness_tracker"), "propagate", True)
    household_id = uuid4()
    service = PreparednessService(
        repository=InMemorySnapshotRepository({household_id: _snapshot(two_adults)}),
        debug=True,
    )

    with caplog.at_level(logging.INFO, logger="preparedness_tracker"):
        service.get_dashboard(household_id, today=TODAY)

    assert "Preparedness score" in caplog.text


def test_unknown_household_raises() -> None:
    service = PreparednessService(repository=InMemorySnapshotRepository())

    with pytest.raises(KeyError):
        service.get_dashboard(uuid4(), today=TODAY)


def test_shopping_list_keeps_shortage_order(two_adults) -> None:
    household_id = uuid4()
    catalog = [
        make_entry(id="batteries", base_quantity=2),
        make_entry(id="candles", base_quantity=8),
    ]
    snapshot = _snapshot(
        two_adults,
        categories=[Category("tools-supplies")],
        items=[],
        catalog=catalog,
    )
    summary = PreparednessService(
        repository=InMemorySnapshotRepository({household_id: snapshot})
    ).get_dashboard(household_id, today=TODAY)

    entries = build_shopping_list(summary.statuses)

    assert [(entry.item_id, entry.missing) for entry in entries] == [
        ("candles", 8),
        ("batteries", 2),
    ]
    assert entries == summary.shopping_list


def test_score_status_follows_configured_thresholds(two_adults) -> None:
    household_id = uuid4()
    service = PreparednessService(
        repository=InMemorySnapshotRepository({household_id: _snapshot(two_adults)}),
        config=CalculationConfig(ok_score_threshold=30, warning_score_threshold=10),
    )

    summary = service.get_dashboard(household_id, today=TODAY)

    assert summary.score == 33
    assert summary.score_status == ItemStatus.OK
