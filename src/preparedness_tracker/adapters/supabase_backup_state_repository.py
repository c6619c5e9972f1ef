"""Supabase repository for backup reminder state."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from preparedness_tracker.adapters.storage_models import BackupStateRow
from preparedness_tracker.domain.backup import BackupReminderState
from preparedness_tracker.services.backup_reminder import BackupStateRepository

_TABLE = "backup_state"


@dataclass
class SupabaseBackupStateRepository(BackupStateRepository):
    """Supabase implementation for backup reminder fields."""

    client: Client

    def get_state(self, household_id: UUID) -> BackupReminderState:
        """Return the stored state; unreadable dates come back as None."""
        response = (
            self.client.table(_TABLE)
            .select("last_backup_date, last_modified, dismissed_until")
            .eq("household_id", str(household_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return BackupReminderState()
        return BackupStateRow.model_validate(response.data[0]).to_domain()

    def set_dismissed_until(self, household_id: UUID, value: date) -> None:
        """Write the dismissal date in a single upsert."""
        self._upsert(household_id, {"dismissed_until": value.isoformat()})

    def set_last_backup_date(self, household_id: UUID, value: date) -> None:
        """Write the last backup date in a single upsert."""
        self._upsert(household_id, {"last_backup_date": value.isoformat()})

    def _upsert(self, household_id: UUID, fields: dict[str, object]) -> None:
        self.client.table(_TABLE).upsert(
            {"household_id": str(household_id), **fields},
            on_conflict="household_id",
        ).execute()
