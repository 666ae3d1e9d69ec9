"""
Shared dependencies for routers.
Provides database and service initialization.

The database handle is created once at startup and passed explicitly
into the repository and service; request handlers receive the service
through FastAPI's dependency injection.
"""
from typing import Optional

from ..services.database import DatabaseFactory, DatabaseInterface
from ..repositories import FolderRepository
from ..services.folder_service import FolderService
from ..core.config import DATABASE_TYPE
from ..core.logging_config import get_logger

logger = get_logger(__name__)

# Global services (will be initialized on startup)
# These are shared across all request handlers
db_service: Optional[DatabaseInterface] = None
folder_repository: Optional[FolderRepository] = None
folder_service: Optional[FolderService] = None


async def initialize_database(database_type: Optional[str] = None):
    """Initialize database adapter based on configuration."""
    global db_service

    database_type = (database_type or DATABASE_TYPE).lower()
    logger.info(f"Initializing database: {database_type}")

    if database_type == "mongodb":
        logger.info("  → Database Type: MongoDB")
        db_service = await DatabaseFactory.create_and_initialize("mongodb")
        logger.info("  ✅ MongoDB initialized")
    elif database_type == "memory":
        logger.info("  → Database Type: Memory (in-memory, non-persistent)")
        db_service = await DatabaseFactory.create_and_initialize("memory")
        logger.info("  ✅ Memory Database initialized")
    else:
        raise ValueError(f"Unsupported DATABASE_TYPE: {database_type}. Supported types: 'mongodb', 'memory'")


async def initialize_services():
    """
    Initialize the folder repository and service after the database is ready.
    Ensures the (user_id, name) index exists; this runs once per process.
    """
    global folder_repository, folder_service

    if db_service is None:
        await initialize_database()

    logger.info("Initializing services...")

    folder_repository = FolderRepository(db_service)
    await folder_repository.create_index()
    logger.info("  ✅ Folder Repository initialized")

    folder_service = FolderService(folder_repository)
    logger.info("  ✅ Folder Service initialized")


async def shutdown_services():
    """Release the database connection."""
    global db_service, folder_repository, folder_service

    if db_service is not None:
        await db_service.close()
        logger.debug("Database connection closed")

    db_service = None
    folder_repository = None
    folder_service = None


def get_db_service() -> DatabaseInterface:
    """Get database service (dependency injection)."""
    if db_service is None:
        raise RuntimeError("Database service not initialized")
    return db_service


def get_folder_service() -> FolderService:
    """Get folder service (dependency injection)."""
    if folder_service is None:
        raise RuntimeError("Folder service not initialized")
    return folder_service
