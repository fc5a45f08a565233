"""
Token issuing route.
"""
import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..auth.tokens import create_access_token
from ..config.database import USERS, get_database
from ..config.settings import Settings
from ..schemas.user import TokenResponse
from ..utils.dependencies import get_app_settings, server_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.get("/jwt", response_model=TokenResponse, responses={403: {"model": TokenResponse}})
async def issue_token(
    email: str = Query(..., description="Email of a registered user"),
    settings: Settings = Depends(get_app_settings),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    try:
        user = await db[USERS].find_one({"email": email})
    except Exception as e:
        raise server_error(e, "look up user")

    if not user:
        logger.warning(f"Token refused for unknown email {email}")
        return JSONResponse(
            status_code=403,
            content=TokenResponse(access_token="").model_dump(by_alias=True),
        )

    return TokenResponse(access_token=create_access_token(email, settings))
