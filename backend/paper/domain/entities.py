"""
Domain entities - Core business objects.
These represent the business concepts, not database models.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from .value_objects import FolderId, UserId

DEFAULT_FOLDER_NAME = "默认"
DEFAULT_FOLDER_DESCRIPTION = "System-defined folder."


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds (the precision MongoDB stores)."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


class FolderType(str, Enum):
    """Who created the folder."""
    SYSTEM_DEFINED = "system"
    USER_DEFINED = "user"


@dataclass
class Folder:
    """
    Folder entity - a named container, optionally nested under a parent folder,
    owned by exactly one user.

    parent_id is a plain reference: its existence and the absence of cycles
    are not checked here.
    """
    id: FolderId
    parent_id: Optional[FolderId]
    user_id: UserId
    created_at: datetime
    updated_at: datetime
    name: str
    description: Optional[str]
    type: FolderType

    @classmethod
    def default_system_folder(cls, user_id: str) -> "Folder":
        """Build the default folder every user gets on sign-up."""
        now = utc_now()
        return cls(
            id=FolderId(str(uuid.uuid4())),
            parent_id=None,
            user_id=UserId(user_id),
            created_at=now,
            updated_at=now,
            name=DEFAULT_FOLDER_NAME,
            description=DEFAULT_FOLDER_DESCRIPTION,
            type=FolderType.SYSTEM_DEFINED
        )

    @classmethod
    def new_user_folder(
        cls,
        user_id: str,
        name: str,
        parent_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> "Folder":
        """Build a folder created by an explicit user request. None parent means root."""
        now = utc_now()
        return cls(
            id=FolderId(str(uuid.uuid4())),
            parent_id=FolderId(parent_id) if parent_id is not None else None,
            user_id=UserId(user_id),
            created_at=now,
            updated_at=now,
            name=name,
            description=description,
            type=FolderType.USER_DEFINED
        )

    def is_root(self) -> bool:
        """Check if folder sits at the root of its owner's tree."""
        return self.parent_id is None

    def is_system_defined(self) -> bool:
        return self.type == FolderType.SYSTEM_DEFINED
