"""
Database configuration and connection management.
Handles the MongoDB connection lifecycle for the e-mart collections.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from .settings import Settings

logger = logging.getLogger(__name__)

PRODUCTS = "products"
SHIPPING = "shipping"
USERS = "users"


class DatabaseManager:
    """Owns the MongoDB client and database handle for one application."""

    def __init__(self, settings: Settings, client: Optional[AsyncIOMotorClient] = None):
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = client
        self.database: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish connection to MongoDB."""
        try:
            logger.info("🚀 Connecting to MongoDB...")

            if self.client is None:
                self.client = AsyncIOMotorClient(
                    self.settings.mongo_uri,
                    serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms,
                    connectTimeoutMS=self.settings.connect_timeout_ms,
                    maxPoolSize=self.settings.max_pool_size,
                    minPoolSize=self.settings.min_pool_size,
                )

            await self.client.admin.command("ping")
            self.database = self.client[self.settings.database_name]
            logger.info("✅ Connected to MongoDB successfully")

        except Exception as db_error:
            self.database = None
            logger.warning(f"⚠️  MongoDB connection failed: {db_error}")

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        try:
            if self.client is not None:
                self.client.close()
                logger.info("🔌 MongoDB connection closed")
        except Exception as e:
            logger.error(f"Error during database disconnect: {e}")
        self.database = None

    async def create_indexes(self) -> None:
        """Create the lookup indexes used by the email-keyed routes."""
        if self.database is None:
            logger.warning("Database not connected, skipping index creation")
            return

        try:
            await self.database[USERS].create_index("email")
            await self.database[SHIPPING].create_index("email")
            logger.info("✅ Database indexes created successfully")

        except Exception as index_error:
            logger.warning(f"⚠️  Failed to create indexes: {index_error}")

    def get_database(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self.database is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self.database

    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self.database is not None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for the database connection."""
    db_manager: DatabaseManager = app.state.db_manager

    logger.info("🚀 Starting up application...")
    await db_manager.connect()
    await db_manager.create_indexes()

    yield

    await db_manager.disconnect()


def get_database_manager(request: Request) -> DatabaseManager:
    """Get the database manager attached to the running application."""
    return request.app.state.db_manager


async def get_database(request: Request) -> AsyncIOMotorDatabase:
    """FastAPI dependency to get database instance."""
    db_manager = get_database_manager(request)
    if not db_manager.is_connected():
        raise HTTPException(
            status_code=503,
            detail="Database connection not available. Please check your MongoDB connection.",
        )
    return db_manager.get_database()
