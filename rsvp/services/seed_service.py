"""
First-run seeding of example parties
"""

import logging
from sqlalchemy.orm import Session

from rsvp.models import Party, Guest
from rsvp.services.repositories import PartyRepo

logger = logging.getLogger(__name__)

SEED_PARTIES = {
    "ABC123": ["John Doe"],
    "XYZ789": ["Jane Smith", "Bob Smith"],
}

def seed_if_empty(db: Session) -> bool:
    """Create the example parties when the store has none.

    Returns True if anything was written.
    """
    if PartyRepo.any_parties(db):
        logger.info("Store already has parties, skipping seed")
        return False

    parties = [
        Party(code=code, guests=[Guest(full_name=name) for name in names])
        for code, names in SEED_PARTIES.items()
    ]
    PartyRepo.add_all(db, parties)
    logger.info(f"Seeded {len(parties)} example parties")
    return True
