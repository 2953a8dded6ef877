"""
Error handlers for the FastAPI application.

Every failure leaves the API as an ``ErrorEnvelope``:
``{"status": "error", "data": null, "error": ..., "error_code": ..., ...}``.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from typing import Dict, Any, Optional

from travel_tracker.core.exceptions import TravelTrackerException, ErrorCode
from travel_tracker.schemas.base import ErrorEnvelope

logger = logging.getLogger(__name__)

# Status codes raised by routing itself (unknown path, wrong method, ...)
HTTP_STATUS_ERROR_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.UNAUTHORIZED,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    422: ErrorCode.VALIDATION_ERROR,
}


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


class ErrorHandler:
    """
    Turns exceptions into error envelopes and counts them per error code.
    """

    def __init__(self):
        self.error_counts: Dict[str, int] = {}

    async def handle_app_exception(
        self,
        request: Request,
        exc: TravelTrackerException
    ) -> JSONResponse:
        """Domain errors raised by services and dependencies."""
        request_id = _request_id(request)
        logger.warning(
            f"{exc.error_code.value} on {request.method} {request.url.path}: {exc.message}",
            extra={
                "request_id": request_id,
                "error_code": exc.error_code.value,
                "status_code": exc.status_code,
            }
        )
        return self._respond(
            exc.error_code,
            exc.message,
            request_id,
            exc.status_code,
            details=exc.details,
        )

    async def handle_validation_error(
        self,
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """
        Request body, path or query failed validation.

        Each failure is reported as ``{"field", "message", "type"}`` where
        ``field`` is the dotted location, e.g. ``body.return_date``.
        """
        request_id = _request_id(request)
        validation_errors = [
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logger.warning(
            f"Validation failed on {request.url.path}: {len(validation_errors)} field errors",
            extra={"request_id": request_id, "validation_errors": validation_errors}
        )
        return self._respond(
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            request_id,
            422,
            details={"validation_errors": validation_errors},
        )

    async def handle_http_exception(
        self,
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        request_id = _request_id(request)
        error_code = HTTP_STATUS_ERROR_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)
        logger.warning(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}",
            extra={"request_id": request_id, "status_code": exc.status_code}
        )
        response = self._respond(error_code, str(exc.detail), request_id, exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    async def handle_generic_exception(
        self,
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Anything unexpected; the traceback is logged, never returned."""
        request_id = _request_id(request)
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=exc,
            extra={"request_id": request_id}
        )
        return self._respond(
            ErrorCode.INTERNAL_SERVER_ERROR,
            "An internal server error occurred",
            request_id,
            500,
        )

    def _respond(
        self,
        error_code: ErrorCode,
        message: str,
        request_id: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        self._track_error(error_code.value)
        envelope = ErrorEnvelope(
            error=message,
            error_code=error_code.value,
            details=details or None,
            request_id=request_id,
        )
        return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))

    def _track_error(self, error_code: str) -> None:
        count = self.error_counts.get(error_code, 0) + 1
        self.error_counts[error_code] = count
        if count % 10 == 0:
            logger.warning(f"{error_code} has occurred {count} times")

    def get_error_statistics(self) -> Dict[str, Any]:
        return {
            "error_counts": dict(self.error_counts),
            "total_errors": sum(self.error_counts.values())
        }


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """Register the envelope handlers on ``app``."""
    app.add_exception_handler(TravelTrackerException, error_handler.handle_app_exception)
    app.add_exception_handler(RequestValidationError, error_handler.handle_validation_error)
    # fastapi.HTTPException subclasses the Starlette one
    app.add_exception_handler(StarletteHTTPException, error_handler.handle_http_exception)
    app.add_exception_handler(Exception, error_handler.handle_generic_exception)
