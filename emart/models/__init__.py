"""
Models package for database document structures.
These models represent how data is stored in MongoDB.
"""
from .user import UserRole, UserTitle

__all__ = [
    "UserRole",
    "UserTitle",
]
