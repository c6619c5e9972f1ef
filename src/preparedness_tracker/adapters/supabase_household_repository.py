"""Supabase repository for household dashboard snapshots."""

import logging
from dataclasses import dataclass
from uuid import UUID

from pydantic import ValidationError
from supabase import Client

from preparedness_tracker.adapters.storage_models import (
    HouseholdRow,
    InventoryItemRow,
    RecommendedItemRow,
)
from preparedness_tracker.config import parse_disabled_ids
from preparedness_tracker.domain.models import (
    Category,
    InventoryItem,
    RecommendedItemDefinition,
)
from preparedness_tracker.domain.snapshot import HouseholdSnapshot
from preparedness_tracker.services.dashboard import HouseholdSnapshotRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseHouseholdSnapshotRepository(HouseholdSnapshotRepository):
    """Supabase implementation reading a household's dashboard inputs."""

    client: Client

    def load_snapshot(self, household_id: UUID) -> HouseholdSnapshot:
        """Return household settings, categories, inventory and catalog."""
        household = self._household(household_id)
        return HouseholdSnapshot(
            household=household.to_household(),
            categories=self._categories(household_id),
            items=self._items(household_id),
            catalog=self._catalog(household_id),
            disabled_ids=parse_disabled_ids(household.disabled_recommendations),
            options=household.to_options(),
        )

    def _household(self, household_id: UUID) -> HouseholdRow:
        response = (
            self.client.table("households")
            .select("*")
            .eq("id", str(household_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return HouseholdRow()
        return HouseholdRow.model_validate(response.data[0])

    def _categories(self, household_id: UUID) -> list[Category]:
        response = (
            self.client.table("household_categories")
            .select("category_id")
            .eq("household_id", str(household_id))
            .order("position", desc=False)
            .execute()
        )
        return [Category(id=str(row["category_id"])) for row in response.data or []]

    def _items(self, household_id: UUID) -> list[InventoryItem]:
        response = (
            self.client.table("inventory_items")
            .select("*")
            .eq("household_id", str(household_id))
            .execute()
        )
        items = []
        for row in response.data or []:
            try:
                items.append(InventoryItemRow.model_validate(row).to_domain())
            except ValidationError as exc:
                _logger.warning(
                    "Skipping unreadable inventory row %s: %s", row.get("id"), exc
                )
        return items

    def _catalog(self, household_id: UUID) -> list[RecommendedItemDefinition]:
        response = (
            self.client.table("recommended_items")
            .select("*")
            .eq("household_id", str(household_id))
            .order("position", desc=False)
            .execute()
        )
        entries = []
        for row in response.data or []:
            try:
                entries.append(RecommendedItemRow.model_validate(row).to_domain())
            except ValidationError as exc:
                _logger.warning(
                    "Skipping unreadable catalog row %s: %s", row.get("id"), exc
                )
        return entries
