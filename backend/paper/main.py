from .gateway import APIGateway
from .routers import folders
from .routers.dependencies import initialize_database, initialize_services, shutdown_services
from .core.config import ENVIRONMENT, DATABASE_TYPE, CORS_ORIGINS, OPENAPI_URL, DOCS_URL
from .core.logging_config import setup_logging, get_logger

# Initialize logging
setup_logging()
logger = get_logger(__name__)

# Initialize API Gateway
gateway = APIGateway(
    title="Paper Api",
    description="Folder management backend for Paper",
    version="0.0.1"
)

# Setup middleware (CORS, request id, logging, error handling)
gateway.setup_middleware()

# All API routes live under /api
gateway.register_router(folders.router, prefix="/api", tags=["Folders"])

# Register health check endpoints
gateway.register_health_endpoints()

# Get FastAPI app instance
app = gateway.get_app()


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup."""
    logger.info("=" * 60)
    logger.info("Starting Paper Backend...")
    logger.info("=" * 60)

    logger.info("API Gateway Configuration:")
    logger.info(f"  → API Title: {app.title}")
    logger.info(f"  → API Version: {app.version}")
    logger.info(f"  → OpenAPI: {OPENAPI_URL if gateway.enable_docs else 'Disabled (production)'}")
    logger.info(f"  → Swagger UI: {DOCS_URL if gateway.enable_docs else 'Disabled (production)'}")
    logger.info(f"  → Environment: {ENVIRONMENT}")

    logger.info("CORS Configuration:")
    logger.info(f"  → Allowed Origins: {', '.join(CORS_ORIGINS)}")

    logger.info(f"  → Database Backend: {DATABASE_TYPE.upper()}")

    # Initialize database and services
    await initialize_database()
    await initialize_services()

    logger.info("=" * 60)
    logger.info("✅ Paper Backend initialized successfully")
    logger.info("=" * 60)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    logger.info("Shutting down Paper Backend...")
    await shutdown_services()
    logger.info("Paper Backend shutdown complete")
