from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from app.core.exceptions import ContactIntakeError
from app.schemas.response import ErrorResponse
from app.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def add_exception_handlers(app: FastAPI, settings: Settings = default_settings):
    """
    Registers exception handlers with the FastAPI app.
    """
    @app.exception_handler(ContactIntakeError)
    async def contact_intake_exception_handler(request: Request, exc: ContactIntakeError):
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.for_status(
                exc.status_code,
                exc.message,
                code=exc.code,
                details=exc.details
            ).render()
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Handles standard HTTP exceptions (404, 405, etc.)
        """
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse.for_status(
                exc.status_code,
                str(exc.detail),
                code="HTTP_ERROR"
            ).render(),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handles Pydantic validation errors.
        """
        return JSONResponse(
            status_code=422,
            content=ErrorResponse.for_status(
                422,
                "Input validation failed",
                code="VALIDATION_ERROR",
                details=jsonable_errors(exc)
            ).render()
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catch-all for unhandled exceptions.
        """
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else "unknown"
            },
            exc_info=True
        )

        message = "Server error" if settings.is_production else str(exc)

        return JSONResponse(
            status_code=500,
            content=ErrorResponse.for_status(
                500,
                message,
                code="INTERNAL_ERROR"
            ).render()
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Pydantic error entries, minus the raw input/ctx objects that may not serialize."""
    return [
        {key: value for key, value in error.items() if key in ("type", "loc", "msg")}
        for error in exc.errors()
    ]
