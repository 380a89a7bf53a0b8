"""
Guest-facing RSVP routes
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rsvp.core.db import get_db
from rsvp.schemas.rsvp import VerifyCodeRequest, VerifyCodeResponse, SubmitRsvpRequest
from rsvp.services.rsvp_service import RsvpService
from rsvp.utils.responses import empty_response, not_found_response

router = APIRouter()

@router.post(
    "/verify-code",
    response_model=VerifyCodeResponse,
    responses={404: {"description": "No party has this code"}},
)
def verify_code(
    request_data: VerifyCodeRequest,
    db: Session = Depends(get_db)
):
    """Return the guest list of the party matching the code"""
    guests = RsvpService.verify_code(code=request_data.code, db=db)
    if guests is None:
        return not_found_response()

    return VerifyCodeResponse(guests=guests)

@router.post(
    "/submit",
    responses={404: {"description": "No party has this code"}},
)
def submit_rsvp(
    request_data: SubmitRsvpRequest,
    db: Session = Depends(get_db)
):
    """Save guest answers for the party matching the code"""
    found = RsvpService.submit_rsvp(
        code=request_data.code,
        guests=request_data.guests,
        db=db
    )
    if not found:
        return not_found_response()

    return empty_response()
