"""Tests for calorie and water helpers."""

from preparedness_tracker.domain.calories import (
    calories_from_weight,
    item_calories_for_entry,
    item_total_calories,
    total_calories,
)
from preparedness_tracker.domain.models import CalculationConfig
from preparedness_tracker.domain.water import (
    preparation_water_required,
    total_water_needs,
    water_per_unit,
)
from tests.conftest import make_entry, make_item


def test_calories_from_weight() -> None:
    assert calories_from_weight(250, 400) == 1000


def test_total_calories_converts_kilograms_through_unit_weight() -> None:
    assert total_calories(2, 500) == 1000
    assert total_calories(1.5, 200, "kilograms", 500) == 600
    assert total_calories(1.5, 200, "kilograms") == 300


def test_item_without_calories_contributes_nothing() -> None:
    assert item_total_calories(make_item(category_id="food")) == 0


def test_item_calories_prefer_item_value() -> None:
    entry = make_entry(id="rice", category="food", calories_per_unit=300)
    own = make_item(item_type="rice", quantity=2, calories_per_unit=100)
    borrowed = make_item(item_type="rice", quantity=2)

    assert item_calories_for_entry(own, entry) == 200
    assert item_calories_for_entry(borrowed, entry) == 600
    assert item_calories_for_entry(borrowed, None) == 0


def test_water_per_unit_lookup_order() -> None:
    catalog = [
        make_entry(id="pasta", category="food", requires_water_liters=1),
        make_entry(id="rice", category="food", requires_water_liters=0.5),
    ]

    assert water_per_unit(make_item(requires_water_liters=2), catalog) == 2
    assert water_per_unit(make_item(product_template_id="rice"), catalog) == 0.5
    assert water_per_unit(make_item(item_type="Pasta"), catalog) == 1
    assert water_per_unit(make_item(item_type="beans"), catalog) == 0


def test_preparation_water_scales_with_quantity() -> None:
    catalog = [make_entry(id="pasta", category="food", requires_water_liters=1)]
    items = [make_item(item_type="pasta", quantity=3), make_item(quantity=5)]

    assert preparation_water_required(items, catalog) == 3


def test_total_water_needs(two_adults) -> None:
    catalog = [make_entry(id="pasta", category="food", requires_water_liters=1)]
    items = [make_item(item_type="pasta", quantity=2)]

    needs = total_water_needs(items, two_adults, catalog, CalculationConfig())

    assert needs.drinking_water == 18
    assert needs.preparation_water == 2
    assert needs.total_water == 20
