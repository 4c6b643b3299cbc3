"""
LessonDeck - Main Application Entry Point

Turns a lesson description into a generated outline, a slide preview and a
downloadable PowerPoint deck.
"""
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from src.core import get_settings, setup_logging
from src.api.routes import lessons, presentations

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    settings = get_settings()

    # Startup
    logger.info(f"🚀 Starting {settings.app_name}...")
    logger.info(f"🤖 Generation provider: \033[96m{settings.generation_provider}\033[0m")
    if settings.has_webhook:
        logger.info(f"⏱️  Webhook timeout: \033[93m{settings.webhook_timeout}s\033[0m")
    else:
        logger.warning("⚠️  WEBHOOK_URL not set - generation will return the sample outline")

    yield

    # Shutdown
    logger.info(f"👋 Shutting down {settings.app_name}...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Lesson outline generation with slide preview and PowerPoint export",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition", "X-Page-Count"],
    )

    # Include API routers
    app.include_router(lessons.router, tags=["lessons"])
    app.include_router(presentations.router, tags=["presentations"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "app_name": settings.app_name,
            "generation_provider": settings.generation_provider,
        }

    @app.get("/api/config")
    async def get_public_config():
        """Get public configuration."""
        return {
            "app_name": settings.app_name,
            "webhook_enabled": settings.has_webhook,
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
