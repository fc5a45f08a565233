"""
User data models for database documents.
Role and title flags are stored as plain strings but only these values are accepted.
"""
from enum import Enum


class UserRole(str, Enum):
    """Values accepted for a user's ``role`` field."""
    ADMIN = "admin"


class UserTitle(str, Enum):
    """Values accepted for a user's ``title`` field."""
    VENDOR = "vendor"
