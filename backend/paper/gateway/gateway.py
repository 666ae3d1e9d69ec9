"""
API Gateway

Main gateway class that builds the FastAPI application and wires routing,
middleware and documentation. Acts as the single entry point for all API requests.
"""
from typing import Optional, List
from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.config import (
    ENVIRONMENT,
    CORS_ORIGINS,
    CORS_METHODS,
    CORS_HEADERS,
    OPENAPI_URL,
    DOCS_URL
)
from ..core.logging_config import get_logger
from .middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    ErrorHandlingMiddleware
)

logger = get_logger(__name__)


class APIGateway:
    """
    API Gateway that manages routing, middleware, and documentation.

    Responsibilities:
    - Initialize FastAPI application (OpenAPI JSON + Swagger UI)
    - Register middleware (CORS, request id, logging, error handling)
    - Register routers
    - Provide health check endpoints
    """

    def __init__(
        self,
        title: str = "Paper Api",
        description: str = "Folder management for Paper",
        version: str = "0.0.1",
        enable_docs: Optional[bool] = None
    ):
        """
        Initialize API Gateway.

        Args:
            title: API title
            description: API description
            version: API version
            enable_docs: Enable API docs (disabled in production when None)
        """
        self.title = title
        self.description = description
        self.version = version
        self.enable_docs = enable_docs if enable_docs is not None else (
            ENVIRONMENT != "production"
        )

        self.app = FastAPI(
            title=self.title,
            description=self.description,
            version=self.version,
            openapi_url=OPENAPI_URL if self.enable_docs else None,
            docs_url=DOCS_URL if self.enable_docs else None,
            redoc_url=None
        )

        logger.info("API Gateway initialized")

    def setup_middleware(self):
        """Configure all middleware. The last one added runs first."""
        logger.info("Setting up middleware...")

        # Error handling (innermost, so request id is already set)
        self.app.add_middleware(ErrorHandlingMiddleware)
        logger.debug("  → Error handling middleware added")

        self.app.add_middleware(RequestLoggingMiddleware)
        logger.debug("  → Request logging middleware added")

        self.app.add_middleware(RequestIDMiddleware)
        logger.debug("  → Request ID middleware added")

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=CORS_METHODS,
            allow_headers=CORS_HEADERS,
        )
        logger.debug(f"  → CORS middleware added (origins: {', '.join(CORS_ORIGINS)})")

        logger.info("✅ All middleware configured")

    def register_router(
        self,
        router: APIRouter,
        prefix: str = "",
        tags: Optional[List[str]] = None
    ):
        """
        Register a router with the gateway.

        Args:
            router: FastAPI router instance
            prefix: URL prefix for the router (e.g., "/api")
            tags: OpenAPI tags for documentation
        """
        self.app.include_router(router, prefix=prefix, tags=tags or [])
        logger.info(f"Registered router at prefix '{prefix}'")

    def register_health_endpoints(self):
        """Register root and health check endpoints."""

        @self.app.get("/", include_in_schema=False)
        async def root():
            """Root endpoint - API information."""
            return {
                "message": f"{self.title} is running",
                "version": self.version,
                "docs": DOCS_URL if self.enable_docs else None
            }

        @self.app.get("/health", include_in_schema=False)
        async def health_check():
            """
            Health check. Returns 503 until the database and services are initialized.
            """
            from ..routers.dependencies import get_db_service, get_folder_service

            try:
                get_db_service()
                get_folder_service()
            except RuntimeError as e:
                logger.warning(f"Health check failed: {e}")
                return JSONResponse(
                    status_code=503,
                    content={"status": "unhealthy", "reason": "Services not initialized"}
                )
            return {"status": "healthy", "database": "connected"}

        logger.info("Health check endpoints registered")

    def get_app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self.app
