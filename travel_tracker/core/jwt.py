"""JWT issue / verify utilities (access & refresh tokens)"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any
import jwt

from travel_tracker.config import get_settings

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def _build_payload(subject: str, expires_minutes: int, token_type: str) -> Dict[str, Any]:
    now = datetime.now(timezone.utc)
    return {
        "sub": subject,
        "type": token_type,
        "iat": now,
        "exp": now + timedelta(minutes=expires_minutes),
    }


def create_access_token(subject: str, expires_minutes: int | None = None) -> str:
    security = get_settings().security
    minutes = expires_minutes or security.access_token_expire_minutes
    return jwt.encode(
        _build_payload(subject, minutes, ACCESS_TOKEN_TYPE),
        security.jwt_secret,
        algorithm=security.jwt_algorithm,
    )


def create_refresh_token(subject: str, expires_minutes: int | None = None) -> str:
    security = get_settings().security
    minutes = expires_minutes or security.refresh_token_expire_minutes
    return jwt.encode(
        _build_payload(subject, minutes, REFRESH_TOKEN_TYPE),
        security.refresh_secret,
        algorithm=security.jwt_algorithm,
    )


def decode_token(token: str, refresh: bool = False) -> Dict[str, Any] | None:
    security = get_settings().security
    secret = security.refresh_secret if refresh else security.jwt_secret
    expected_type = REFRESH_TOKEN_TYPE if refresh else ACCESS_TOKEN_TYPE
    try:
        payload = jwt.decode(token, secret, algorithms=[security.jwt_algorithm])
    except jwt.PyJWTError:
        return None
    # Same secret may sign both kinds when no refresh secret is configured
    if payload.get("type") != expected_type:
        return None
    return payload
