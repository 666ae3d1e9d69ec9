"""
MongoDB adapter implementing DatabaseInterface.

Uses pymongo's native asyncio client. One client (and its connection pool)
is created per process at startup and shared by every request.
"""
from typing import List, Dict, Optional

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.errors import PyMongoError

from .base import DatabaseInterface
from ...domain.exceptions import PersistenceError
from ...core.logging_config import get_logger

logger = get_logger(__name__)

FOLDER_INDEX_NAME = "user_id_1_name_1"


class MongoAdapter(DatabaseInterface):
    """
    Production adapter over a single MongoDB collection.

    Each method is exactly one driver call; driver errors are re-raised
    as PersistenceError with the original exception chained.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        collection_name: str,
        client: Optional[AsyncMongoClient] = None
    ):
        """
        Initialize MongoDB adapter.

        Args:
            uri: MongoDB connection string
            database_name: Database holding the folder collection
            collection_name: Folder collection name
            client: Existing client to reuse (a new one is created from uri otherwise)
        """
        self._client = client or AsyncMongoClient(uri, tz_aware=True)
        self._database_name = database_name
        self._collection = self._client[database_name][collection_name]

    async def initialize(self):
        """Verify the server is reachable."""
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB is not reachable: {e}")
            raise PersistenceError(f"MongoDB is not reachable: {e}") from e
        logger.info(f"Connected to MongoDB database '{self._database_name}'")

    async def close(self):
        await self._client.close()

    async def insert_folder(self, folder_doc: Dict) -> None:
        try:
            await self._collection.insert_one(folder_doc)
        except PyMongoError as e:
            logger.error(f"insert_one failed for folder {folder_doc.get('_id')}: {e}")
            raise PersistenceError(str(e)) from e

    async def find_folder(self, folder_id: str) -> Optional[Dict]:
        try:
            return await self._collection.find_one({"_id": folder_id})
        except PyMongoError as e:
            logger.error(f"find_one failed for folder {folder_id}: {e}")
            raise PersistenceError(str(e)) from e

    async def find_folders_by_user(self, user_id: str) -> List[Dict]:
        try:
            cursor = self._collection.find({"user_id": user_id})
            return await cursor.to_list()
        except PyMongoError as e:
            logger.error(f"find failed for user {user_id}: {e}")
            raise PersistenceError(str(e)) from e

    async def set_folder(self, folder_id: str, folder_doc: Dict) -> bool:
        fields = {key: value for key, value in folder_doc.items() if key != "_id"}
        try:
            result = await self._collection.update_one({"_id": folder_id}, {"$set": fields})
        except PyMongoError as e:
            logger.error(f"update_one failed for folder {folder_id}: {e}")
            raise PersistenceError(str(e)) from e
        return result.matched_count > 0

    async def delete_folder(self, folder_id: str) -> bool:
        try:
            result = await self._collection.delete_one({"_id": folder_id})
        except PyMongoError as e:
            logger.error(f"delete_one failed for folder {folder_id}: {e}")
            raise PersistenceError(str(e)) from e
        return result.deleted_count > 0

    async def create_folder_index(self) -> None:
        try:
            await self._collection.create_index(
                [("user_id", ASCENDING), ("name", ASCENDING)],
                name=FOLDER_INDEX_NAME
            )
        except PyMongoError as e:
            logger.error(f"create_index failed: {e}")
            raise PersistenceError(str(e)) from e
