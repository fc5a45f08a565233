from .settings import Settings, get_settings
from .database import (
    PRODUCTS,
    SHIPPING,
    USERS,
    DatabaseManager,
    get_database,
    get_database_manager,
    lifespan,
)

__all__ = [
    "Settings",
    "get_settings",
    "DatabaseManager",
    "get_database",
    "get_database_manager",
    "lifespan",
    "PRODUCTS",
    "SHIPPING",
    "USERS",
]
