"""Runtime preferences for the household."""

from dataclasses import dataclass, field, replace

from habit_tracker.config import Settings


@dataclass(frozen=True)
class Preferences:
    """User-toggleable options."""

    show_kid_variants: bool = False
    sync_steps_from_health: bool = True
    push_weight_to_health: bool = True
    # Stored only; nothing reads it yet.
    cloud_sync_enabled: bool = False
    shared_rollups_enabled: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "Preferences":
        """Return preferences seeded from configuration defaults."""
        return cls(
            show_kid_variants=settings.show_kid_variants,
            sync_steps_from_health=settings.sync_steps_from_health,
            push_weight_to_health=settings.push_weight_to_health,
            cloud_sync_enabled=settings.cloud_sync_enabled,
            shared_rollups_enabled=settings.shared_rollups_enabled,
        )


@dataclass
class PreferencesService:
    """Holds the current preferences and applies edits."""

    current: Preferences = field(default_factory=Preferences)

    def get(self) -> Preferences:
        """Return the current preferences."""
        return self.current

    def update(self, **changes: bool) -> Preferences:
        """Replace the given options and return the new preferences."""
        self.current = replace(self.current, **changes)
        return self.current
