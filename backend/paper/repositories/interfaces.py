"""
Repository interfaces - Define contracts for data access.
Any persistence backend implementing this capability set is a valid substitute.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from ..domain.entities import Folder


class IFolderRepository(ABC):
    """
    Interface for folder data access.

    Every operation is a single backend call and may raise PersistenceError.
    Absence is never an error: reads return None / an empty list, and
    update/delete of a missing id are no-ops.
    """

    @abstractmethod
    async def create_folder(self, folder: Folder) -> None:
        """Insert a new folder keyed by folder.id."""
        pass

    @abstractmethod
    async def get_folder_by_id(self, folder_id: str) -> Optional[Folder]:
        """Get folder by ID, None if absent."""
        pass

    @abstractmethod
    async def get_folders_by_user_id(self, user_id: str) -> List[Folder]:
        """Get all folders owned by a user (unordered)."""
        pass

    @abstractmethod
    async def update_folder(self, folder: Folder) -> Folder:
        """Replace the whole stored folder matching folder.id and return folder."""
        pass

    @abstractmethod
    async def delete_folder(self, folder_id: str) -> None:
        """Delete a folder by ID."""
        pass

    @abstractmethod
    async def create_index(self) -> None:
        """Ensure the (user_id, name) compound index exists."""
        pass
