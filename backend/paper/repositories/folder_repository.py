"""
Folder Repository - Concrete implementation of folder data access.
"""
from typing import List, Optional

from .interfaces import IFolderRepository
from ..domain.entities import Folder, FolderType
from ..domain.value_objects import FolderId, UserId
from ..services.database.base import DatabaseInterface
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class FolderRepository(IFolderRepository):
    """
    Repository for folder data access.
    Maps domain entities to stored documents and delegates to the adapter.
    Stateless apart from the injected adapter, so it is safe to share.
    """

    def __init__(self, db_service: DatabaseInterface):
        """
        Initialize repository with database service.

        Args:
            db_service: Database adapter (dependency injection)
        """
        self._db = db_service

    def _to_entity(self, data: dict) -> Folder:
        """Convert database record to domain entity."""
        parent_id = data.get("parent_id")
        return Folder(
            id=FolderId(data["_id"]),
            parent_id=FolderId(parent_id) if parent_id is not None else None,
            user_id=UserId(data["user_id"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            name=data["name"],
            description=data.get("description"),
            type=FolderType(data["type"])
        )

    def _to_dict(self, folder: Folder) -> dict:
        """Convert domain entity to database record."""
        return {
            "_id": str(folder.id),
            "parent_id": str(folder.parent_id) if folder.parent_id is not None else None,
            "user_id": str(folder.user_id),
            "created_at": folder.created_at,
            "updated_at": folder.updated_at,
            "name": folder.name,
            "description": folder.description,
            "type": folder.type.value
        }

    async def create_folder(self, folder: Folder) -> None:
        """Create a new folder."""
        await self._db.insert_folder(self._to_dict(folder))
        logger.debug(f"Created folder {folder.id} for user {folder.user_id}")

    async def get_folder_by_id(self, folder_id: str) -> Optional[Folder]:
        """Get folder by ID."""
        data = await self._db.find_folder(folder_id)
        return self._to_entity(data) if data else None

    async def get_folders_by_user_id(self, user_id: str) -> List[Folder]:
        """Get all folders owned by a user."""
        records = await self._db.find_folders_by_user(user_id)
        return [self._to_entity(record) for record in records]

    async def update_folder(self, folder: Folder) -> Folder:
        """Replace every field of the stored folder; a missing folder is left absent."""
        matched = await self._db.set_folder(str(folder.id), self._to_dict(folder))
        if not matched:
            logger.debug(f"Update matched no folder with id {folder.id}")
        return folder

    async def delete_folder(self, folder_id: str) -> None:
        """Delete a folder. Children are not touched."""
        deleted = await self._db.delete_folder(folder_id)
        if not deleted:
            logger.debug(f"Delete matched no folder with id {folder_id}")

    async def create_index(self) -> None:
        """Ensure the (user_id, name) index exists."""
        await self._db.create_folder_index()
        logger.info("Folder index on (user_id, name) ensured")
