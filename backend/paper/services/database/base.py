"""
Abstract base class for database adapters.
All database implementations must inherit from this class.
"""
from abc import ABC, abstractmethod
from typing import List, Dict, Optional


class DatabaseInterface(ABC):
    """
    Abstract interface for collection-level folder storage.

    Adapters speak plain documents (dicts keyed like the persisted layout,
    with the folder id under "_id"). Every backend failure must surface as
    PersistenceError.
    """

    @abstractmethod
    async def insert_folder(self, folder_doc: Dict) -> None:
        """Insert a folder document. Fails on duplicate "_id"."""
        pass

    @abstractmethod
    async def find_folder(self, folder_id: str) -> Optional[Dict]:
        """Get a folder document by "_id", None if absent."""
        pass

    @abstractmethod
    async def find_folders_by_user(self, user_id: str) -> List[Dict]:
        """Get every folder document owned by a user, in no particular order."""
        pass

    @abstractmethod
    async def set_folder(self, folder_id: str, folder_doc: Dict) -> bool:
        """
        Overwrite every field of the document matching folder_id.

        Returns:
            True if a document matched; a miss does not insert anything.
        """
        pass

    @abstractmethod
    async def delete_folder(self, folder_id: str) -> bool:
        """Delete the document matching folder_id. Returns True if one was removed."""
        pass

    @abstractmethod
    async def create_folder_index(self) -> None:
        """Ensure the (user_id, name) compound index exists. Idempotent."""
        pass

    @abstractmethod
    async def initialize(self):
        """Initialize database (connect, verify reachability)."""
        pass

    @abstractmethod
    async def close(self):
        """Close database connection."""
        pass
