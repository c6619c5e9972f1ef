"""Backup reminder scheduling."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from preparedness_tracker.domain.backup import BackupReminderState
from preparedness_tracker.domain.models import CalculationConfig

DECEMBER = 12

_logger = logging.getLogger(__name__)


class BackupStateRepository(Protocol):
    """Persistence interface for backup reminder fields.

    Each setter must write its field in one atomic step.
    """

    def get_state(self, household_id: UUID) -> BackupReminderState:
        """Return the stored reminder state, with unreadable fields absent."""

    def set_dismissed_until(self, household_id: UUID, value: date) -> None:
        """Persist the dismissal date."""

    def set_last_backup_date(self, household_id: UUID, value: date) -> None:
        """Persist the last backup date."""


def calendar_day(value: datetime | date) -> date:
    """Strip the time of day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def should_show_backup_reminder(
    state: BackupReminderState,
    item_count: int,
    today: date,
    threshold_days: int = CalculationConfig.backup_reminder_days,
) -> bool:
    """Decide whether the backup reminder is due.

    Never-backed-up households are reminded as soon as they store anything.
    Otherwise the reminder waits until data changed after the last backup
    and that change is at least ``threshold_days`` old.
    """
    if state.dismissed_until is not None and today < state.dismissed_until:
        return False
    if state.last_backup_date is None:
        return item_count > 0
    if state.last_modified is None:
        return False
    last_modified = calendar_day(state.last_modified)
    if last_modified <= calendar_day(state.last_backup_date):
        return False
    return (today - last_modified).days >= threshold_days


def next_dismissal_date(today: date) -> date:
    """Return the first day of the month after ``today``."""
    if today.month == DECEMBER:
        return date(today.year + 1, 1, 1)
    return date(today.year, today.month + 1, 1)


@dataclass
class BackupReminderService:
    """Service for backup reminder decisions and their two actions."""

    repository: BackupStateRepository
    threshold_days: int = CalculationConfig.backup_reminder_days
    debug: bool = False

    def should_show(
        self, household_id: UUID, item_count: int, today: date | None = None
    ) -> bool:
        """Return True when the household should see the reminder."""
        state = self.repository.get_state(household_id)
        return should_show_backup_reminder(
            state, item_count, today or date.today(), self.threshold_days
        )

    def dismiss(self, household_id: UUID, today: date | None = None) -> date:
        """Silence the reminder until next month and return that date."""
        dismissed_until = next_dismissal_date(today or date.today())
        self.repository.set_dismissed_until(household_id, dismissed_until)
        if self.debug:
            _logger.info(
                "Backup reminder dismissed: household=%s until=%s",
                household_id,
                dismissed_until,
            )
        return dismissed_until

    def record_backup(self, household_id: UUID, today: date | None = None) -> date:
        """Record today as the last backup date and return it."""
        backup_date = today or date.today()
        self.repository.set_last_backup_date(household_id, backup_date)
        if self.debug:
            _logger.info(
                "Backup recorded: household=%s date=%s", household_id, backup_date
            )
        return backup_date
