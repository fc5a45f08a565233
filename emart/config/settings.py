"""
Application configuration settings.
Handles environment variables and application-wide settings.
"""
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application settings
    app_name: str = Field(default="E-Mart API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    app_description: str = Field(
        default="Catalog, users, shipping and payments backend for the e-mart store",
        alias="APP_DESCRIPTION",
    )
    debug: bool = Field(default=False, alias="DEBUG")

    # Server settings
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    reload: bool = Field(default=False, alias="RELOAD")

    # Database settings
    db_user: Optional[str] = Field(default=None, alias="DB_USER")
    db_pass: Optional[str] = Field(default=None, alias="DB_PASS")
    db_host: Optional[str] = Field(default=None, alias="DB_HOST")
    mongodb_url: str = Field(default="mongodb://localhost:27017", alias="MONGODB_URL")
    database_name: str = Field(default="e-mart", alias="DATABASE_NAME")

    # MongoDB connection settings
    server_selection_timeout_ms: int = Field(default=5000, alias="MONGODB_SERVER_SELECTION_TIMEOUT_MS")
    connect_timeout_ms: int = Field(default=5000, alias="MONGODB_CONNECT_TIMEOUT_MS")
    max_pool_size: int = Field(default=10, alias="MONGODB_MAX_POOL_SIZE")
    min_pool_size: int = Field(default=1, alias="MONGODB_MIN_POOL_SIZE")

    # Auth settings
    access_token_secret: str = Field(default="", alias="ACCESS_TOKEN")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=120, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Payment settings
    stripe_secret_key: str = Field(default="", alias="STRIPE_SECRET_KEY")
    payment_currency: str = Field(default="usd", alias="PAYMENT_CURRENCY")
    payment_method_types: List[str] = Field(default=["card"], alias="PAYMENT_METHOD_TYPES")

    # HTTP settings
    cors_origins: List[str] = Field(default=["*"], alias="CORS_ORIGINS")

    # Logging settings
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Pagination defaults
    default_page_size: int = Field(default=10, alias="DEFAULT_PAGE_SIZE")

    @property
    def mongo_uri(self) -> str:
        """Connection string for the configured cluster, or the plain URL when no credentials are set."""
        if self.db_user and self.db_host:
            user = quote_plus(self.db_user)
            password = quote_plus(self.db_pass or "")
            return f"mongodb+srv://{user}:{password}@{self.db_host}/?retryWrites=true&w=majority"
        return self.mongodb_url


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
