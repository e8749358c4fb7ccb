"""
PawMart HTTP API.
Adoption listings with compatibility recommendations, a pet-product store,
carts, orders and ratings.
"""

import sys

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .. import __version__
from ..config import get_settings
from ..db.session import create_tables, get_session_factory
from ..exceptions import PawMartError
from ..seed import seed_catalog
from .routers import cart, donations, missing_posts, pets, products, users


def configure_logging(level: str) -> None:
    """Replace loguru's default handler with a stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


async def pawmart_error_handler(request: Request, exc: PawMartError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="PawMart API",
        description="Pet adoption marketplace and pet-product store",
        version=__version__,
        docs_url=None if settings.is_production() else "/docs",
        redoc_url=None if settings.is_production() else "/redoc",
    )

    app.add_exception_handler(PawMartError, pawmart_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(users.router)
    app.include_router(pets.router)
    app.include_router(products.router)
    app.include_router(cart.router)
    app.include_router(donations.router)
    app.include_router(missing_posts.router)

    @app.on_event("startup")
    async def startup_event():
        """Prepare the database and log configuration."""
        logger.info("PawMart API is starting up...")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Recommendation top-k: {settings.recommendation_top_k}")

        create_tables()
        if settings.seed_on_startup:
            session = get_session_factory()()
            try:
                seed_catalog(session)
            finally:
                session.close()

        logger.info("Startup complete - ready to accept requests")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": "PawMart API",
            "version": __version__,
            "status": "running",
            "endpoints": {
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        logger.debug("Health check called")
        return {"status": "healthy", "service": "pawmart-api"}

    logger.info("FastAPI app initialized successfully")
    return app
