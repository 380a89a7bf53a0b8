"""
RSVP request/response schemas
"""

from typing import List
from pydantic import BaseModel

from .guest import GuestDto

class VerifyCodeRequest(BaseModel):
    """Party code lookup request"""
    code: str

class VerifyCodeResponse(BaseModel):
    """Roster of the party matching a code"""
    guests: List[GuestDto]

class SubmitRsvpRequest(BaseModel):
    """Guest answers submitted under a party code"""
    code: str
    guests: List[GuestDto] = []
