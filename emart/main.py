# main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config.database import DatabaseManager, get_database_manager, lifespan
from .config.settings import Settings, get_settings
from .routes import routers
from .schemas.common import HealthCheckResponse, RootResponse
from .services.payments import PaymentGateway

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    db_manager: Optional[DatabaseManager] = None,
    payment_gateway: Optional[PaymentGateway] = None,
) -> FastAPI:
    """Build the API with its database manager and payment gateway attached to ``app.state``."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_manager = db_manager or DatabaseManager(settings)
    app.state.payment_gateway = payment_gateway or PaymentGateway(
        settings.stripe_secret_key,
        currency=settings.payment_currency,
        payment_method_types=settings.payment_method_types,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in routers:
        app.include_router(router)

    @app.get("/", response_model=RootResponse)
    async def root():
        return {"message": "server running", "status": "running"}

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(request: Request):
        db_manager = get_database_manager(request)
        database = "disconnected"
        if db_manager.is_connected():
            try:
                await db_manager.get_database().command("ping")
                database = "connected"
            except Exception as e:
                logger.warning(f"⚠️  Health check ping failed: {e}")
        return {"status": "healthy", "database": database, "version": settings.app_version}

    return app


app = create_app()

