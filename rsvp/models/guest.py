"""
Guest model
"""

from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, Text
from sqlalchemy.orm import relationship

from rsvp.core.db import Base

class Guest(Base):
    __tablename__ = "guests"

    id = Column(Integer, primary_key=True, index=True)
    party_id = Column(Integer, ForeignKey("parties.id"), nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    # NULL means the guest has not answered yet
    attending_friday = Column(Boolean, nullable=True)
    attending_saturday = Column(Boolean, nullable=True)
    meal_preference = Column(Text, nullable=True)
    music_suggestions = Column(Text, nullable=True)

    # Relationships
    party = relationship("Party", back_populates="guests")
