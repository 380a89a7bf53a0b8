"""
Pydantic schemas package
"""

from .guest import *
from .rsvp import *

__all__ = [
    "GuestDto",
    "VerifyCodeRequest",
    "VerifyCodeResponse",
    "SubmitRsvpRequest",
]
