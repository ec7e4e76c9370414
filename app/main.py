"""
app/main.py

Purpose: Application entry point

- Initializes FastAPI app
- Loads configuration and logging
- Registers API routes (contact form, admin messages)
- No business logic should be written here
- Manages application lifecycle (startup/shutdown)
"""

from contextlib import asynccontextmanager
from typing import Optional
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.core.config import Settings, settings as default_settings, validate_settings
from app.core.errors import add_exception_handlers
from app.core.logging import setup_logging, get_logger
from app.db.database import close_database, connect_database
from app.services.smslenz_service import SmslenzClient
from app.api import contact, messages

# Initialize logging first
setup_logging()
logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Builds the FastAPI application for the given settings.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.
        Handles startup and shutdown events.
        """
        logger.info("🚀 Starting contact intake service...")

        try:
            logger.info("Validating configuration...")
            validate_settings(settings)
            logger.info("✅ Configuration validated")

            app.state.database = await run_in_threadpool(connect_database, settings)
            app.state.sms_client = SmslenzClient.from_settings(settings)

            logger.info(f"Environment: {settings.ENVIRONMENT}")
            logger.info(f"SMS configured: {app.state.sms_client.is_configured()}")

        except Exception as e:
            logger.critical(f"Failed to start application: {str(e)}", exc_info=True)
            raise

        yield  # Application runs here

        logger.info("🛑 Shutting down contact intake service...")
        close_database(app.state.database)
        app.state.database = None
        logger.info("👋 Shut down cleanly")

    app = FastAPI(
        title="LogozoDev Contact API",
        description="Contact form intake with thank-you SMS",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        # The SMS call alone may take up to 10 seconds
        if process_time > 10.0:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path}",
                extra={"process_time": process_time}
            )

        return response

    add_exception_handlers(app, settings)

    app.include_router(contact.router, prefix=settings.API_PREFIX, tags=["Contact"])
    app.include_router(messages.router, prefix=settings.API_PREFIX, tags=["Messages"])

    @app.get(f"{settings.API_PREFIX}/health", tags=["Health"])
    async def health_check(request: Request):
        """
        Health check endpoint.
        Reports database connectivity.
        """
        database = getattr(request.app.state, "database", None)
        db_healthy = database is not None and await run_in_threadpool(database.check_health)

        return JSONResponse(
            status_code=200 if db_healthy else 503,
            content={
                "ok": db_healthy,
                "t": int(time.time() * 1000),
                "database": "healthy" if db_healthy else "unhealthy",
            },
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=3000,
        reload=default_settings.is_development,
        log_level=default_settings.LOG_LEVEL.lower()
    )
