"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from futurefit.domain.profiles import Profile
from futurefit.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get(self, user_id: str) -> Profile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("user_profiles")
            .select("height, weight, age, sex, goal, activity_level")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return Profile.from_dict(response.data[0])
        return None

    def put(self, user_id: str, profile: Profile) -> Profile:
        """Upsert the profile row for a user."""
        payload = {
            "user_id": user_id,
            **profile.to_dict(),
            "updated_at": datetime.now(tz=UTC).isoformat(),
        }
        response = (
            self.client.table("user_profiles")
            .upsert(payload, on_conflict="user_id")
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save user profile in Supabase")
        return Profile.from_dict(response.data[0])
