"""
Repository layer over the SQLAlchemy store.
"""

from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy.orm import Session, selectinload

from rsvp.models import Party


# -------- Party repository --------

class PartyRepo:
    @staticmethod
    def get_by_code(db: Session, code: str) -> Optional[Party]:
        return (
            db.query(Party)
            .options(selectinload(Party.guests))
            .filter(Party.code == code)
            .order_by(Party.id)
            .first()
        )

    @staticmethod
    def any_parties(db: Session) -> bool:
        return db.query(Party.id).first() is not None

    @staticmethod
    def add_all(db: Session, parties: Iterable[Party]) -> None:
        try:
            db.add_all(list(parties))
            db.commit()
        except Exception:
            db.rollback()
            raise

    @staticmethod
    def save(db: Session, party: Party) -> None:
        """Commit pending changes to the party's guests in one transaction"""
        try:
            db.add(party)
            db.commit()
        except Exception:
            db.rollback()
            raise
