"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from preparedness_tracker.adapters.supabase_backup_state_repository import (
    SupabaseBackupStateRepository,
)
from preparedness_tracker.adapters.supabase_household_repository import (
    SupabaseHouseholdSnapshotRepository,
)
from preparedness_tracker.config import Settings
from preparedness_tracker.services.backup_reminder import BackupReminderService
from preparedness_tracker.services.dashboard import PreparednessService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    preparedness_service: PreparednessService
    backup_reminder_service: BackupReminderService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if not resolved_settings.supabase_url or not resolved_settings.supabase_service_key:
        raise ValueError("Supabase URL and service key are required")
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    config = resolved_settings.calculation_config()
    preparedness_service = PreparednessService(
        repository=SupabaseHouseholdSnapshotRepository(supabase_client),
        config=config,
        debug=resolved_settings.debug,
    )
    backup_reminder_service = BackupReminderService(
        repository=SupabaseBackupStateRepository(supabase_client),
        threshold_days=config.backup_reminder_days,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        preparedness_service=preparedness_service,
        backup_reminder_service=backup_reminder_service,
    )
