"""
Guest-related Pydantic schemas
"""

from typing import Optional
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class GuestDto(BaseModel):
    """Public view of a guest, also used as the submit payload item"""
    id: int
    full_name: Optional[str] = None
    attending_friday: Optional[bool] = None
    attending_saturday: Optional[bool] = None
    meal_preference: Optional[str] = None
    music_suggestions: Optional[str] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
