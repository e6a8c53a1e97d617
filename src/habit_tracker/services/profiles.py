"""Household profile management."""

import math
from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from habit_tracker.domain.errors import UnknownProfileError
from habit_tracker.domain.models import UserProfile


def suggested_water(weight: float) -> int:
    """Return a daily water target in ounces: half the body weight, rounded."""
    return math.floor(weight * 0.5 + 0.5)


def default_profiles() -> list[UserProfile]:
    """Return the seed household with Chris as the primary profile."""
    return [
        UserProfile(
            id=uuid4(),
            name="Chris",
            target_calories=2100,
            target_water_oz=suggested_water(198),
            target_weight=185,
            starting_weight=198,
            is_primary=True,
        ),
        UserProfile(
            id=uuid4(),
            name="Jill",
            target_calories=1700,
            target_water_oz=suggested_water(155),
            target_weight=145,
            starting_weight=155,
            is_primary=False,
        ),
    ]


@dataclass
class ProfileService:
    """Application service for the fixed set of household profiles."""

    profiles: list[UserProfile] = field(default_factory=default_profiles)

    def list_profiles(self) -> list[UserProfile]:
        """Return profiles in seed order."""
        return list(self.profiles)

    def get(self, profile_id: UUID) -> UserProfile:
        """Return a profile or raise UnknownProfileError."""
        for profile in self.profiles:
            if profile.id == profile_id:
                return profile
        raise UnknownProfileError(profile_id)

    def find_by_name(self, name: str) -> UserProfile | None:
        """Return the first profile with a case-insensitive name match."""
        lowered = name.lower()
        return next(
            (profile for profile in self.profiles if profile.name.lower() == lowered),
            None,
        )

    def primary(self) -> UserProfile:
        """Return the primary profile, falling back to the first one."""
        return next(
            (profile for profile in self.profiles if profile.is_primary),
            self.profiles[0],
        )

    def set_primary(self, profile_id: UUID) -> UserProfile:
        """Mark one profile primary and clear the flag on all others."""
        target = self.get(profile_id)
        self.profiles = [
            replace(profile, is_primary=profile.id == target.id)
            for profile in self.profiles
        ]
        return self.get(profile_id)

    def update_targets(
        self,
        profile_id: UUID,
        *,
        target_calories: int | None = None,
        target_water_oz: int | None = None,
        target_weight: float | None = None,
    ) -> UserProfile:
        """Apply target edits; omitted values are left as they are."""
        current = self.get(profile_id)
        updated = replace(
            current,
            target_calories=(
                current.target_calories if target_calories is None else target_calories
            ),
            target_water_oz=(
                current.target_water_oz if target_water_oz is None else target_water_oz
            ),
            target_weight=(
                current.target_weight if target_weight is None else target_weight
            ),
        )
        self.profiles = [
            updated if profile.id == profile_id else profile
            for profile in self.profiles
        ]
        return updated
