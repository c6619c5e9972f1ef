"""Domain models for backup reminders."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class BackupReminderState:
    """Persisted backup bookkeeping for a household."""

    last_backup_date: date | None = None
    last_modified: datetime | date | None = None
    dismissed_until: date | None = None
