"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.api import admin, health, menu, orders
from storefront.core.config import Settings, settings as default_settings
from storefront.core.logging import setup_logging
from storefront.db.database import create_engine, create_sessionmaker, init_db
from storefront.services.access.guard import AccessGuard
from storefront.services.errors import NotFound, Unauthorized
from storefront.services.menu.catalog import Catalog

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an application with its own engine, session factory and access guard."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        setup_logging(settings.log_level)
        engine = create_engine(settings.database_url)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        await init_db(engine)
        async with app.state.sessionmaker() as session:
            await Catalog(session, seed_file=settings.menu_seed_file).ensure_seeded()
        logger.info(f"Admin access mode: {app.state.access_guard.mode.value}")
        yield
        # Shutdown
        await engine.dispose()

    app = FastAPI(
        title="Storefront",
        description="Menu and order store for a food-delivery storefront",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.access_guard = AccessGuard.from_secret(settings.admin_password)

    app.include_router(health.router, tags=["health"])
    app.include_router(menu.router, tags=["menu"])
    app.include_router(orders.router, tags=["orders"])
    app.include_router(admin.router, tags=["admin"])

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(Unauthorized)
    async def unauthorized_handler(request: Request, exc: Unauthorized):
        return JSONResponse(status_code=401, content={"detail": str(exc)})

    @app.get("/")
    async def root():
        """Service info."""
        return {
            "message": f"{settings.restaurant_name} storefront API",
            "version": "0.1.0",
        }

    return app


app = create_app()
