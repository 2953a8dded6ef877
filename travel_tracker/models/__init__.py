"""
ORM models for the travel tracker.

Importing this package registers every mapper on ``Base.metadata``.
"""

from .user import User
from .trip import Trip
from .setting import UserSetting, GREEN_CARD_DATE_KEY

__all__ = [
    "User",
    "Trip",
    "UserSetting",
    "GREEN_CARD_DATE_KEY",
]
