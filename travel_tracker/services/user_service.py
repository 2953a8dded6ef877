"""
User Service - account registration and lookup
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from travel_tracker.core.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from travel_tracker.core.security import hash_password, verify_password
from travel_tracker.models.user import User

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email.strip().lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def require_by_email(self, email: str) -> User:
        user = self.get_by_email(email)
        if not user:
            raise UserNotFoundError(email)
        return user

    def register(self, email: str, password: str, name: Optional[str] = None) -> User:
        """
        Create an account

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        email = email.strip().lower()
        if self.get_by_email(email):
            raise EmailAlreadyRegisteredError(email)

        user = User(
            email=email,
            name=name or email.split("@")[0],
            hashed_password=hash_password(password),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Registered user {user.id}", extra={"user_id": user.id})
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Check an email/password pair

        Raises:
            InvalidCredentialsError: On unknown email or wrong password
        """
        user = self.get_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            logger.warning("Failed login attempt", extra={"email": email})
            raise InvalidCredentialsError()
        return user
