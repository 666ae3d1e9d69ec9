"""
Domain layer - Contains business entities and domain logic.
This layer is independent of infrastructure and frameworks.
"""
from .entities import Folder, FolderType, utc_now
from .exceptions import PersistenceError
from .value_objects import FolderId, UserId

__all__ = [
    "Folder",
    "FolderType",
    "utc_now",
    "PersistenceError",
    "FolderId",
    "UserId"
]
