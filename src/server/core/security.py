"""
Password hashing and access tokens.

Passwords are hashed with bcrypt; access tokens are HMAC-signed JWTs whose
``sub`` claim carries the user id.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging

import bcrypt
import jwt

from core.config import get_settings
from core.exceptions import UnauthorizedException

logger = logging.getLogger('CORE_SECURITY')


def hash_password(password: str) -> str:
    settings = get_settings()
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


def create_access_token(subject: str, email: Optional[str] = None, expires_minutes: Optional[int] = None) -> str:
    """
    Sign an access token for ``subject``.

    Args:
        subject: User id placed in the ``sub`` claim
        email: Optional email claim
        expires_minutes: Lifetime override (defaults to settings)

    Returns:
        str: Encoded JWT
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    lifetime = settings.jwt_expires_minutes if expires_minutes is None else expires_minutes
    payload: Dict[str, Any] = {
        "sub": subject,
        "iat": now,
        "exp": now + timedelta(minutes=lifetime),
    }
    if email:
        payload["email"] = email
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises:
        UnauthorizedException: Token expired, tampered with, malformed or missing ``sub``
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise UnauthorizedException("Token has expired") from e
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected access token: {e}")
        raise UnauthorizedException("Invalid token") from e

    if not payload.get("sub"):
        raise UnauthorizedException("Invalid token payload")
    return payload
