"""
Profile store.

Holds exactly one profile row. Saving replaces it wholesale.
"""

import logging
from typing import Optional

from tradejournal.core.errors import InvalidInput
from tradejournal.core.models import PROFILE_ID, ProfileRow
from tradejournal.core.records import Profile
from tradejournal.store.base import BaseStore

logger = logging.getLogger(__name__)


class ProfileStore(BaseStore):
    """Read and replace the singleton profile."""

    def upsert_profile(
        self,
        name: str,
        currency: str,
        email: str = "",
        experience: str = "",
        timezone: str = "",
    ) -> None:
        """
        Create or replace the profile.

        Every column is overwritten; fields not given are reset to "".

        Raises:
            InvalidInput: If name or currency is blank
            NotConnected: If the database is not connected
            WriteFailed: If the database rejects the row
        """
        if not name or not name.strip():
            raise InvalidInput("name", name, "required")
        if not currency or not currency.strip():
            raise InvalidInput("currency", currency, "required")

        row = ProfileRow(
            id=PROFILE_ID,
            name=name,
            email=email or "",
            experience=experience or "",
            currency=currency,
            timezone=timezone or "",
        )

        with self.writing("save profile") as session:
            session.merge(row)

        logger.info(f"Saved profile: {row.name} ({row.currency})")

    def fetch_profile(self) -> Optional[Profile]:
        """
        Get the profile.

        Returns:
            Profile, or None on first run before any profile is saved
        """
        with self.reading("load profile") as session:
            row = session.get(ProfileRow, PROFILE_ID)

            if row is None:
                logger.debug("No profile saved yet")
                return None

            return Profile(
                name=row.name,
                currency=row.currency,
                email=row.email or "",
                experience=row.experience or "",
                timezone=row.timezone or "",
            )
