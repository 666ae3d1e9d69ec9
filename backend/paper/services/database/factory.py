"""
Database Factory for creating database adapters.
Implements Factory Pattern for plug-and-play database support.
"""
from typing import Optional

from .base import DatabaseInterface
from .memory_adapter import MemoryAdapter
from .mongo_adapter import MongoAdapter
from ...core.config import (
    DATABASE_TYPE,
    MONGODB_URI,
    MONGODB_DATABASE,
    FOLDER_COLLECTION_NAME
)
from ...core.logging_config import get_logger

logger = get_logger(__name__)


class DatabaseFactory:
    """
    Factory for creating database adapters.
    Supports MongoDB (production) and Memory (in-memory) backends.
    """

    @staticmethod
    def create(database_type: Optional[str] = None, **kwargs) -> DatabaseInterface:
        """
        Create a database adapter instance.

        Args:
            database_type: Type of database ('mongodb', 'memory', or None to use DATABASE_TYPE)
            **kwargs: Additional arguments for specific database adapters

        Returns:
            DatabaseInterface instance

        Examples:
            # MongoDB
            db = DatabaseFactory.create('mongodb', uri='mongodb://localhost:27017')

            # Memory (in-memory, non-persistent)
            db = DatabaseFactory.create('memory')
        """
        if database_type is None:
            database_type = DATABASE_TYPE

        database_type = database_type.lower()

        if database_type == "mongodb":
            return DatabaseFactory._create_mongodb(**kwargs)
        elif database_type == "memory":
            return MemoryAdapter()
        else:
            raise ValueError(
                f"Unsupported database type: {database_type}. "
                f"Supported types: 'mongodb', 'memory'"
            )

    @staticmethod
    def _create_mongodb(**kwargs) -> MongoAdapter:
        return MongoAdapter(
            uri=kwargs.get("uri", MONGODB_URI),
            database_name=kwargs.get("database_name", MONGODB_DATABASE),
            collection_name=kwargs.get("collection_name", FOLDER_COLLECTION_NAME),
            client=kwargs.get("client")
        )

    @staticmethod
    async def create_and_initialize(database_type: Optional[str] = None, **kwargs) -> DatabaseInterface:
        """
        Create database adapter and initialize it.

        Args:
            database_type: Type of database
            **kwargs: Additional arguments

        Returns:
            Initialized DatabaseInterface instance
        """
        db = DatabaseFactory.create(database_type, **kwargs)
        await db.initialize()
        return db
