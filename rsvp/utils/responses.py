"""
Response helpers for the RSVP endpoints
"""

from fastapi import status
from fastapi.responses import Response

def empty_response(status_code: int = status.HTTP_200_OK) -> Response:
    """Response with a status and no body"""
    return Response(status_code=status_code)

def not_found_response() -> Response:
    """404 with an empty body"""
    return empty_response(status.HTTP_404_NOT_FOUND)
