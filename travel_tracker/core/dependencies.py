"""
Dependency providers for FastAPI routes.
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from travel_tracker.core.db import get_db
from travel_tracker.core.exceptions import AuthenticationError
from travel_tracker.core.jwt import decode_token
from travel_tracker.models.user import User

logger = logging.getLogger(__name__)


def get_request_id(request: Request) -> str:
    """
    Get request ID from request state.

    Args:
        request: FastAPI request object

    Returns:
        str: Request ID
    """
    return getattr(request.state, 'request_id', 'unknown')


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Resolve the user behind the ``Authorization: Bearer`` access token.

    Raises:
        AuthenticationError: If the header is missing or malformed, the token
            is invalid or expired, or the user no longer exists
    """
    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Missing or malformed authorization header")

    payload = decode_token(parts[1], refresh=False)
    if not payload or not payload.get("sub"):
        raise AuthenticationError("Invalid or expired token")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid token payload")

    user = db.get(User, user_id)
    if not user:
        logger.warning(
            f"Token for unknown user {user_id}",
            extra={"request_id": get_request_id(request)},
        )
        raise AuthenticationError("User not found")
    return user
