"""
Folder Service - Business logic for folder operations.
Sits between the HTTP layer and the repository: ownership checks,
name validation, and the merge step of partial updates.
"""
from dataclasses import replace
from typing import List, Optional

from .interfaces import IFolderService
from ..api.exceptions import FolderNotFoundError, InvalidFolderNameError
from ..domain.entities import Folder, utc_now
from ..domain.value_objects import FolderId
from ..repositories.interfaces import IFolderRepository
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class FolderService(IFolderService):
    """
    Service for folder business logic.
    Handles folder creation, validation, and operations.
    """

    def __init__(self, folder_repo: IFolderRepository):
        """
        Initialize folder service.

        Args:
            folder_repo: Folder repository (dependency injection)
        """
        self._repo = folder_repo

    def _validate_folder_name(self, name: str) -> str:
        """Validate folder name and return it stripped."""
        name = name.strip()
        if not name:
            raise InvalidFolderNameError("Folder name cannot be empty")
        return name

    async def _get_owned(self, user_id: str, folder_id: str) -> Folder:
        folder = await self._repo.get_folder_by_id(folder_id)
        # Another user's folder is reported exactly like a missing one
        if folder is None or folder.user_id != user_id:
            raise FolderNotFoundError(f"Folder '{folder_id}' not found")
        return folder

    async def create_default_folder(self, user_id: str) -> Folder:
        folder = Folder.default_system_folder(user_id)
        await self._repo.create_folder(folder)
        logger.info(f"Created default folder {folder.id} for user {user_id}")
        return folder

    async def create_folder(
        self,
        user_id: str,
        name: str,
        parent_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> Folder:
        """
        Create a new user-defined folder.

        The parent is stored as given; it is not checked for existence.
        """
        name = self._validate_folder_name(name)

        folder = Folder.new_user_folder(
            user_id=user_id,
            name=name,
            parent_id=parent_id,
            description=description
        )

        await self._repo.create_folder(folder)
        logger.info(f"Created folder {folder.id} ('{folder.name}') for user {user_id}")
        return folder

    async def get_folder(self, user_id: str, folder_id: str) -> Folder:
        """Get a folder by id."""
        return await self._get_owned(user_id, folder_id)

    async def list_folders(self, user_id: str) -> List[Folder]:
        """Get all folders of a user."""
        return await self._repo.get_folders_by_user_id(user_id)

    async def update_folder(
        self,
        user_id: str,
        folder_id: str,
        name: Optional[str] = None,
        parent_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> Folder:
        """
        Apply a partial update.

        Only non-None arguments override the stored values. The merged
        folder, with a fresh updated_at, replaces the stored one whole.
        """
        existing = await self._get_owned(user_id, folder_id)

        changes = {"updated_at": utc_now()}
        if name is not None:
            changes["name"] = self._validate_folder_name(name)
        if parent_id is not None:
            changes["parent_id"] = FolderId(parent_id)
        if description is not None:
            changes["description"] = description

        merged = replace(existing, **changes)
        updated = await self._repo.update_folder(merged)
        logger.info(f"Updated folder {folder_id} for user {user_id}")
        return updated

    async def delete_folder(self, user_id: str, folder_id: str) -> None:
        """Delete a folder. Children keep their now-dangling parent_id."""
        await self._get_owned(user_id, folder_id)
        await self._repo.delete_folder(folder_id)
        logger.info(f"Deleted folder {folder_id} for user {user_id}")
