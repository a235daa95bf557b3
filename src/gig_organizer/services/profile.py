"""Organizer profile, statistics and public performer profiles."""

from dataclasses import dataclass

from gig_organizer.adapters.organizer_api import OrganizerApi
from gig_organizer.domain.profile import (
    OrganizerProfile,
    OrganizerStatistics,
    PerformerProfile,
)


@dataclass
class ProfileService:
    """Profile reads and updates."""

    api: OrganizerApi

    async def get_profile(self) -> OrganizerProfile:
        return OrganizerProfile.model_validate(await self.api.get_profile())

    async def update_profile(self, profile: OrganizerProfile) -> OrganizerProfile:
        """Replace the profile and return the stored version."""
        payload = await self.api.update_profile(profile.to_payload())
        if not payload:
            return profile
        return OrganizerProfile.model_validate(payload)

    async def get_statistics(self) -> OrganizerStatistics:
        return OrganizerStatistics.model_validate(await self.api.get_statistics())

    async def get_performer(self, performer_id: str) -> PerformerProfile:
        return PerformerProfile.model_validate(
            await self.api.get_performer_profile(performer_id)
        )
