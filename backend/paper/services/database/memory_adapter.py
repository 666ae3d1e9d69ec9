"""
In-memory adapter implementing DatabaseInterface.
Used by the test suite and for local demos - stores all documents in a dict.
Data is lost on restart.
"""
from typing import List, Dict, Optional, Tuple
import copy

from .base import DatabaseInterface
from ...domain.exceptions import PersistenceError
from ...core.logging_config import get_logger

logger = get_logger(__name__)

FOLDER_INDEX_KEYS: Tuple[str, ...] = ("user_id", "name")


class MemoryAdapter(DatabaseInterface):
    """
    In-memory database adapter using Python dictionaries.
    Mirrors the MongoDB adapter's semantics: duplicate ids are rejected,
    updates and deletes of missing ids are no-ops.
    """

    def __init__(self):
        # In-memory storage: folder documents by "_id"
        self._folders: Dict[str, Dict] = {}

        # Index definitions created through create_folder_index
        self._indexes: List[Tuple[str, ...]] = []

    async def initialize(self):
        """Initialize database (clears any existing data)."""
        self._folders.clear()
        self._indexes.clear()

    async def close(self):
        """Close database connection (no-op for in-memory)."""
        pass

    async def insert_folder(self, folder_doc: Dict) -> None:
        folder_id = folder_doc.get("_id")
        if not folder_id:
            raise PersistenceError("Folder document must have an '_id' field")
        if folder_id in self._folders:
            raise PersistenceError(f"Duplicate key: folder '{folder_id}' already exists")

        # Deep copy to avoid reference issues
        self._folders[folder_id] = copy.deepcopy(folder_doc)

    async def find_folder(self, folder_id: str) -> Optional[Dict]:
        doc = self._folders.get(folder_id)
        return copy.deepcopy(doc) if doc else None

    async def find_folders_by_user(self, user_id: str) -> List[Dict]:
        return [
            copy.deepcopy(doc)
            for doc in self._folders.values()
            if doc.get("user_id") == user_id
        ]

    async def set_folder(self, folder_id: str, folder_doc: Dict) -> bool:
        doc = self._folders.get(folder_id)
        if doc is None:
            return False

        for key, value in folder_doc.items():
            if key == "_id":
                continue
            doc[key] = copy.deepcopy(value)
        return True

    async def delete_folder(self, folder_id: str) -> bool:
        return self._folders.pop(folder_id, None) is not None

    async def create_folder_index(self) -> None:
        if FOLDER_INDEX_KEYS not in self._indexes:
            self._indexes.append(FOLDER_INDEX_KEYS)

    def get_indexes(self) -> List[Tuple[str, ...]]:
        """Index definitions created so far (useful for tests)."""
        return list(self._indexes)
