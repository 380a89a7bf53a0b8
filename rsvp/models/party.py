"""
Party model
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from rsvp.core.db import Base

class Party(Base):
    __tablename__ = "parties"

    id = Column(Integer, primary_key=True, index=True)
    # Not unique: lookups take the first party by id
    code = Column(String(50), nullable=False, index=True)

    # Relationships
    guests = relationship(
        "Guest",
        back_populates="party",
        cascade="all, delete-orphan",
        order_by="Guest.id",
    )
