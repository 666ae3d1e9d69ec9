"""
Error Handling Middleware

Centralized error handling and response formatting.
"""
import traceback
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status
from ...core.config import ENVIRONMENT
from ...core.logging_config import get_logger
from ...api.exceptions import handle_business_exception, is_business_exception

logger = get_logger(__name__)


def _error_body(request: Request, error, status_code: int) -> dict:
    return {
        "error": error,
        "status_code": status_code,
        "path": request.url.path,
        "request_id": getattr(request.state, "request_id", None)
    }


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that converts exceptions escaping the routers to JSON responses:
    - Business exceptions → their mapped status code (404, 400, 500 for PersistenceError)
    - Unexpected exceptions → 500 with error details (in development)
    """

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)

        except Exception as e:
            if is_business_exception(e):
                http_exception = handle_business_exception(e)
                log = logger.error if http_exception.status_code >= 500 else logger.warning
                log(f"Business exception for {request.method} {request.url.path}: {http_exception.detail}")

                return JSONResponse(
                    status_code=http_exception.status_code,
                    content=_error_body(request, http_exception.detail, http_exception.status_code)
                )

            # Handle unexpected exceptions
            is_development = ENVIRONMENT != "production"

            logger.error(
                f"Unexpected error for {request.method} {request.url.path}: {e}",
                exc_info=True
            )

            content = _error_body(
                request,
                str(e) if is_development else "Internal server error",
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )
            if is_development:
                content["traceback"] = traceback.format_exc()

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=content
            )
