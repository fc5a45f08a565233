"""
User API schemas for request/response validation.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.user import UserRole, UserTitle
from .common import CamelModel


class CreateUserRequest(BaseModel):
    """Request schema for registering a user. Extra profile fields are kept."""
    model_config = ConfigDict(extra="allow")

    email: str = Field(..., min_length=1, description="User email")
    role: Optional[UserRole] = Field(None, description="Role flag, only 'admin' is accepted")
    title: Optional[UserTitle] = Field(None, description="Title flag, only 'vendor' is accepted")


class AdminStatusResponse(CamelModel):
    is_admin: bool


class VendorStatusResponse(CamelModel):
    is_vendor: bool


class TokenResponse(CamelModel):
    access_token: str
