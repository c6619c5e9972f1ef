"""Dashboard service combining category statuses and the overall score."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from preparedness_tracker.domain.item_status import status_from_score
from preparedness_tracker.domain.models import (
    CalculationConfig,
    CategoryStatusSummary,
    ItemStatus,
)
from preparedness_tracker.domain.snapshot import HouseholdSnapshot
from preparedness_tracker.domain.strategies import StrategyRegistry
from preparedness_tracker.services.category_status import (
    calculate_all_category_statuses,
)
from preparedness_tracker.services.preparedness import (
    calculate_category_preparedness,
    calculate_preparedness_score_from_statuses,
)
from preparedness_tracker.services.shopping_list import (
    ShoppingListEntry,
    build_shopping_list,
)
from preparedness_tracker.services.shortages import DEFAULT_REGISTRY

_logger = logging.getLogger(__name__)


class HouseholdSnapshotRepository(Protocol):
    """Read interface for the inputs of a dashboard calculation."""

    def load_snapshot(self, household_id: UUID) -> HouseholdSnapshot:
        """Return the household's current inventory, catalog and settings."""


@dataclass
class DashboardSummary:
    """Per-category statuses with the aggregate score."""

    statuses: list[CategoryStatusSummary]
    score: int
    score_status: ItemStatus
    shopping_list: list[ShoppingListEntry]


def summarize_snapshot(
    snapshot: HouseholdSnapshot,
    config: CalculationConfig,
    today: date,
    registry: StrategyRegistry = DEFAULT_REGISTRY,
) -> DashboardSummary:
    """Compute the dashboard for a snapshot."""
    preparedness = {
        category.id: calculate_category_preparedness(
            category.id,
            snapshot.items,
            snapshot.household,
            snapshot.catalog,
            snapshot.disabled_ids,
            snapshot.options,
            config,
            registry,
        )
        for category in snapshot.categories
    }
    statuses = calculate_all_category_statuses(
        snapshot.categories,
        snapshot.items,
        preparedness,
        snapshot.household,
        snapshot.catalog,
        snapshot.disabled_ids,
        snapshot.options,
        config,
        today,
        registry,
    )
    score = calculate_preparedness_score_from_statuses(statuses)
    return DashboardSummary(
        statuses=statuses,
        score=score,
        score_status=status_from_score(score, config),
        shopping_list=build_shopping_list(statuses),
    )


@dataclass
class PreparednessService:
    """Service computing a household's preparedness dashboard."""

    repository: HouseholdSnapshotRepository
    config: CalculationConfig = field(default_factory=CalculationConfig)
    registry: StrategyRegistry = DEFAULT_REGISTRY
    debug: bool = False

    def get_dashboard(
        self, household_id: UUID, today: date | None = None
    ) -> DashboardSummary:
        """Load the household snapshot and summarise it."""
        snapshot = self.repository.load_snapshot(household_id)
        summary = summarize_snapshot(
            snapshot, self.config, today or date.today(), self.registry
        )
        if self.debug:
            for status in summary.statuses:
                _logger.info(
                    "Category status: household=%s category=%s status=%s percent=%s",
                    household_id,
                    status.category_id,
                    status.status,
                    status.completion_percentage,
                )
            _logger.info(
                "Preparedness score: household=%s score=%s status=%s",
                household_id,
                summary.score,
                summary.score_status,
            )
        return summary
