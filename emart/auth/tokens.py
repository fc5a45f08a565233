"""
Access token issuing and verification
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from ..config.settings import Settings


def create_access_token(email: str, settings: Settings) -> str:
    """Sign a token carrying the user's email, valid for the configured window."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    return jwt.encode(claims, settings.access_token_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Verify a token's signature and expiry and return its claims

    Raises:
        jwt.PyJWTError: If the token is malformed, tampered with or expired
    """
    return jwt.decode(token, settings.access_token_secret, algorithms=[settings.jwt_algorithm])
