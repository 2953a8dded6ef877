"""Authentication endpoints: register, login, token refresh, current user."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from travel_tracker.core.db import get_db
from travel_tracker.core.dependencies import get_current_user
from travel_tracker.core.exceptions import InvalidCredentialsError
from travel_tracker.core.jwt import create_access_token, create_refresh_token, decode_token
from travel_tracker.models.user import User
from travel_tracker.schemas.base import Envelope
from travel_tracker.schemas.user import (
    AuthPayload,
    LoginRequest,
    Token,
    TokenRefresh,
    UserCreate,
    UserRead,
)
from travel_tracker.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_tokens(user_id: int) -> Token:
    subject = str(user_id)
    return Token(
        access_token=create_access_token(subject),
        refresh_token=create_refresh_token(subject),
    )


@router.post("/register", response_model=Envelope[AuthPayload])
def register_user(payload: UserCreate, db: Session = Depends(get_db)):
    user = UserService(db).register(payload.email, payload.password, payload.name)
    return Envelope(
        status="ok",
        data=AuthPayload(user=UserRead.model_validate(user), token=_issue_tokens(user.id)),
    )


@router.post("/login", response_model=Envelope[AuthPayload])
def login_user(payload: LoginRequest, db: Session = Depends(get_db)):
    user = UserService(db).authenticate(payload.email, payload.password)
    return Envelope(
        status="ok",
        data=AuthPayload(user=UserRead.model_validate(user), token=_issue_tokens(user.id)),
    )


@router.post("/refresh", response_model=Envelope[Token])
def refresh_token(payload: TokenRefresh, db: Session = Depends(get_db)):
    decoded = decode_token(payload.refresh_token, refresh=True)
    if not decoded or not decoded.get("sub"):
        raise InvalidCredentialsError("Invalid refresh token")
    try:
        user_id = int(decoded["sub"])
    except (TypeError, ValueError):
        raise InvalidCredentialsError("Invalid refresh token")
    if not UserService(db).get_by_id(user_id):
        raise InvalidCredentialsError("Invalid refresh token")
    return Envelope(status="ok", data=_issue_tokens(user_id))


@router.get("/me", response_model=Envelope[UserRead])
def read_current_user(current_user: User = Depends(get_current_user)):
    """Get the user behind the bearer token."""
    return Envelope(status="ok", data=UserRead.model_validate(current_user))
