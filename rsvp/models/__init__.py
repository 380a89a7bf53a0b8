"""
Database models package
"""

from .party import Party
from .guest import Guest

__all__ = ["Party", "Guest"]
