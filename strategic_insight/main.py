"""
Strategic Insight API - FastAPI application entry point
Document upload, text extraction and AI-backed document Q&A
"""

import logging

# Configure logging to show INFO level
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s"
)

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from strategic_insight.api import chat, documents, users
from strategic_insight.config import Settings
from strategic_insight.core.context import AppContext
from strategic_insight.database import create_tables
from strategic_insight.utils.error_handlers import setup_error_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, context: Optional[AppContext] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Settings to use (loaded from the environment if omitted)
        context: Prebuilt application context (built from settings if omitted)

    Returns:
        FastAPI: Configured application

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not set and no context is given
    """
    if context is None:
        context = AppContext.from_settings(settings or Settings())
    settings = context.settings

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Upload documents and ask questions answered from their content",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "users", "description": "User registration"},
            {"name": "documents", "description": "Document upload and management"},
            {"name": "chat", "description": "Document analysis and chat history"}
        ]
    )
    app.state.context = context

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_error_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        """Initialize database tables on startup"""
        create_tables(context.engine)
        logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} started")
        logger.info(f"Upload directory: {settings.UPLOAD_DIR}")
        logger.info(f"API Docs: http://{settings.API_HOST}:{settings.API_PORT}/docs")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Release pooled database connections"""
        context.engine.dispose()

    @app.get("/")
    async def root():
        """Health check endpoint"""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "healthy"
        }

    @app.get("/health")
    async def health_check(request: Request):
        """Detailed health check including database connectivity"""
        database = "connected"
        try:
            with request.app.state.context.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            database = "unavailable"

        return {
            "status": "healthy" if database == "connected" else "degraded",
            "version": settings.APP_VERSION,
            "database": database
        }

    app.include_router(users.router, prefix="/api")
    app.include_router(documents.router, prefix="/api")
    app.include_router(chat.router, prefix="/api")

    return app


if __name__ == "__main__":
    import uvicorn

    run_settings = Settings()
    uvicorn.run(
        "strategic_insight.main:create_app",
        factory=True,
        host=run_settings.API_HOST,
        port=run_settings.API_PORT,
        reload=run_settings.API_RELOAD
    )
