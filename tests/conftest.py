"""Shared test fixtures."""

import threading
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

import pytest

from preparedness_tracker.config import Settings
from preparedness_tracker.domain.backup import BackupReminderState
from preparedness_tracker.domain.models import (
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
)
from preparedness_tracker.domain.snapshot import HouseholdSnapshot
from preparedness_tracker.services.backup_reminder import BackupStateRepository
from preparedness_tracker.services.dashboard import HouseholdSnapshotRepository

TODAY = date(2025, 6, 1)


def make_item(**overrides: object) -> InventoryItem:
    """Build an inventory item with sensible defaults."""
    values: dict[str, object] = {
        "id": "item-1",
        "name": "Item",
        "category_id": "tools-supplies",
        "quantity": 1,
        "unit": "pieces",
        "never_expires": True,
    }
    values.update(overrides)
    return InventoryItem(**values)  # type: ignore[arg-type]


def make_entry(**overrides: object) -> RecommendedItemDefinition:
    """Build a catalog entry with sensible defaults."""
    values: dict[str, object] = {
        "id": "flashlight",
        "name": "products.flashlight",
        "category": "tools-supplies",
        "base_quantity": 1,
        "unit": "pieces",
        "scale_with_people": False,
        "scale_with_days": False,
    }
    values.update(overrides)
    return RecommendedItemDefinition(**values)  # type: ignore[arg-type]


def bottled_water_entry() -> RecommendedItemDefinition:
    return make_entry(
        id="bottled-water",
        name="products.bottled-water",
        category="water-beverages",
        base_quantity=3,
        unit="liters",
        scale_with_people=True,
        scale_with_days=True,
    )


@dataclass
class InMemoryBackupStateRepository(BackupStateRepository):
    """In-memory backup state repository for tests."""

    states: dict[UUID, BackupReminderState] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def get_state(self, household_id: UUID) -> BackupReminderState:
        return self.states.get(household_id, BackupReminderState())

    def set_dismissed_until(self, household_id: UUID, value: date) -> None:
        with self._lock:
            current = self.get_state(household_id)
            self.states[household_id] = BackupReminderState(
                last_backup_date=current.last_backup_date,
                last_modified=current.last_modified,
                dismissed_until=value,
            )

    def set_last_backup_date(self, household_id: UUID, value: date) -> None:
        with self._lock:
            current = self.get_state(household_id)
            self.states[household_id] = BackupReminderState(
                last_backup_date=value,
                last_modified=current.last_modified,
                dismissed_until=current.dismissed_until,
            )


@dataclass
class InMemorySnapshotRepository(HouseholdSnapshotRepository):
    """In-memory snapshot repository for tests."""

    snapshots: dict[UUID, HouseholdSnapshot] = field(default_factory=dict)

    def load_snapshot(self, household_id: UUID) -> HouseholdSnapshot:
        return self.snapshots[household_id]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def two_adults() -> HouseholdConfig:
    return HouseholdConfig(adults=2, children=0, supply_duration_days=3)


@pytest.fixture
def empty_household() -> HouseholdConfig:
    return HouseholdConfig(adults=0, children=0, supply_duration_days=3)


@pytest.fixture
def backup_repository() -> InMemoryBackupStateRepository:
    return InMemoryBackupStateRepository()
