"""
Folder Service Interface.

Defines the contract for folder business logic operations.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from ...domain.entities import Folder


class IFolderService(ABC):
    """
    Interface for folder business logic.

    Every operation is scoped to an already-authenticated user id.
    Operations on folders that are missing or owned by someone else
    raise FolderNotFoundError.

    No HTTP route creates the default folder. The user-provisioning flow
    (sign-up, which lives outside this service) is expected to call
    create_default_folder exactly once for each new user.
    """

    @abstractmethod
    async def create_default_folder(self, user_id: str) -> Folder:
        """
        Create the system-defined default folder for a new user.

        Args:
            user_id: Owner of the folder

        Returns:
            Created Folder entity
        """
        pass

    @abstractmethod
    async def create_folder(
        self,
        user_id: str,
        name: str,
        parent_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> Folder:
        """
        Create a user-defined folder.

        Args:
            user_id: Owner of the folder
            name: Folder name
            parent_id: Optional parent folder id (None for root)
            description: Optional free text

        Returns:
            Created Folder entity
        """
        pass

    @abstractmethod
    async def get_folder(self, user_id: str, folder_id: str) -> Folder:
        """
        Get one of the user's folders.

        Returns:
            Folder entity
        """
        pass

    @abstractmethod
    async def list_folders(self, user_id: str) -> List[Folder]:
        """
        Get all folders owned by the user.

        Returns:
            List of folders, unordered
        """
        pass

    @abstractmethod
    async def update_folder(
        self,
        user_id: str,
        folder_id: str,
        name: Optional[str] = None,
        parent_id: Optional[str] = None,
        description: Optional[str] = None
    ) -> Folder:
        """
        Merge the supplied fields into the stored folder and save it.

        Returns:
            Updated Folder entity
        """
        pass

    @abstractmethod
    async def delete_folder(self, user_id: str, folder_id: str) -> None:
        """
        Delete one of the user's folders. Child folders are left in place.
        """
        pass
