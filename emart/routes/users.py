"""
User routes: registration, listing, removal and the admin/vendor flags.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..auth.middleware import verify_token
from ..config.database import USERS, get_database
from ..models.user import UserRole, UserTitle
from ..schemas.common import DeleteResultResponse, InsertResultResponse, UpdateResultResponse
from ..schemas.user import AdminStatusResponse, CreateUserRequest, VendorStatusResponse
from ..utils.dependencies import server_error, validate_object_id
from ..utils.serializers import serialize_docs

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.post("/user", response_model=InsertResultResponse)
async def create_user(user: CreateUserRequest, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        result = await db[USERS].insert_one(user.model_dump(mode="json", exclude_unset=True))
        logger.info(f"🆕 User {user.email} registered")
        return InsertResultResponse.from_result(result)
    except Exception as e:
        raise server_error(e, "create user")


@router.get("/user", response_model=List[Dict[str, Any]])
async def list_users(db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        users = await db[USERS].find({}).to_list(length=None)
        return serialize_docs(users)
    except Exception as e:
        raise server_error(e, "list users")


@router.delete("/user/{user_id}", response_model=DeleteResultResponse)
async def delete_user(user_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    object_id = validate_object_id(user_id, "user")
    try:
        result = await db[USERS].delete_one({"_id": object_id})
        return DeleteResultResponse.from_result(result)
    except Exception as e:
        raise server_error(e, "delete user")


@router.get("/users/admin/{email}", response_model=AdminStatusResponse)
async def check_admin(email: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        user = await db[USERS].find_one({"email": email})
    except Exception as e:
        raise server_error(e, "look up user")
    return AdminStatusResponse(is_admin=bool(user) and user.get("role") == UserRole.ADMIN.value)


@router.put("/user/admin/{user_id}", response_model=UpdateResultResponse)
async def make_admin(
    user_id: str,
    decoded: Dict[str, Any] = Depends(verify_token),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    return await _set_flag(db, user_id, "role", UserRole.ADMIN.value, decoded)


@router.get("/user/vendor/{email}", response_model=VendorStatusResponse)
async def check_vendor(email: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    try:
        user = await db[USERS].find_one({"email": email})
    except Exception as e:
        raise server_error(e, "look up user")
    return VendorStatusResponse(is_vendor=bool(user) and user.get("title") == UserTitle.VENDOR.value)


@router.put("/user/vendor/{user_id}", response_model=UpdateResultResponse)
async def make_vendor(
    user_id: str,
    decoded: Dict[str, Any] = Depends(verify_token),
    db: AsyncIOMotorDatabase = Depends(get_database),
):
    return await _set_flag(db, user_id, "title", UserTitle.VENDOR.value, decoded)


async def _set_flag(
    db: AsyncIOMotorDatabase,
    user_id: str,
    field: str,
    value: str,
    decoded: Dict[str, Any],
) -> UpdateResultResponse:
    """Upsert ``field=value`` on the user with ``user_id``."""
    object_id = validate_object_id(user_id, "user")
    try:
        result = await db[USERS].update_one(
            {"_id": object_id},
            {"$set": {field: value}},
            upsert=True,
        )
    except Exception as e:
        raise server_error(e, f"set user {field}")

    logger.info(f"🔑 {decoded.get('email')} set {field}={value} on user {user_id}")
    return UpdateResultResponse.from_result(result)
