"""
RSVP lookup and submission service
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from rsvp.schemas.guest import GuestDto
from rsvp.services.repositories import PartyRepo

logger = logging.getLogger(__name__)

class RsvpService:
    """Service for party roster lookups and guest answers"""

    @staticmethod
    def verify_code(code: str, db: Session) -> Optional[List[GuestDto]]:
        """Return the roster of the party with this code, or None if there is none"""
        party = PartyRepo.get_by_code(db, code)
        if not party:
            logger.info(f"No party found for code {code!r}")
            return None

        return [GuestDto.model_validate(guest) for guest in party.guests]

    @staticmethod
    def submit_rsvp(code: str, guests: List[GuestDto], db: Session) -> bool:
        """Apply submitted answers to the party's guests.

        Each submitted record is matched by id against the roster of the
        party named by ``code``. Matched guests get all four answer fields
        overwritten, nulls included; ids outside the roster are skipped.
        Returns False when no party has the code.
        """
        party = PartyRepo.get_by_code(db, code)
        if not party:
            logger.info(f"No party found for code {code!r}")
            return False

        roster = {guest.id: guest for guest in party.guests}
        updated = 0
        for submitted in guests:
            guest = roster.get(submitted.id)
            if guest is None:
                logger.debug(f"Skipping guest {submitted.id} not in party {party.id}")
                continue

            guest.attending_friday = submitted.attending_friday
            guest.attending_saturday = submitted.attending_saturday
            guest.meal_preference = submitted.meal_preference
            guest.music_suggestions = submitted.music_suggestions
            updated += 1

        PartyRepo.save(db, party)
        logger.info(f"Saved RSVP for party {party.id}: {updated} of {len(guests)} guests updated")
        return True
