"""
Bearer token guard for protected routes
"""
import logging
from typing import Any, Dict, Optional

import jwt
from fastapi import Header, HTTPException, Request

from .tokens import decode_access_token

logger = logging.getLogger(__name__)


def extract_token(authorization: str) -> str:
    """Take the credential part of an ``Authorization: Bearer <token>`` header."""
    parts = authorization.split(" ", 1)
    return parts[1].strip() if len(parts) == 2 else ""


async def verify_token(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Dict[str, Any]:
    """
    Require a valid bearer token and attach its claims to ``request.state.decoded``

    Raises:
        HTTPException: 401 when the header is absent, 403 when the token is rejected
    """
    if not authorization:
        raise HTTPException(status_code=401, detail="unauthorized access")

    token = extract_token(authorization)
    if not token:
        raise HTTPException(status_code=403, detail="forbidden access")

    try:
        decoded = decode_access_token(token, request.app.state.settings)
    except jwt.PyJWTError as e:
        logger.warning(f"Rejected access token: {e}")
        raise HTTPException(status_code=403, detail="forbidden access")

    request.state.decoded = decoded
    return decoded
