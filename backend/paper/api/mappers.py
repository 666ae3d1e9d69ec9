"""
Mappers between domain entities and DTOs.
Separates domain layer from API layer.
"""
from typing import List
from ..domain.entities import Folder
from .dto import FolderDTO


class FolderMapper:
    """Maps between Folder entity and FolderDTO."""

    @staticmethod
    def to_dto(folder: Folder) -> FolderDTO:
        """Convert domain entity to DTO."""
        return FolderDTO(
            id=str(folder.id),
            parent_id=str(folder.parent_id) if folder.parent_id is not None else None,
            name=folder.name,
            description=folder.description,
            type=folder.type
        )

    @staticmethod
    def to_dto_list(folders: List[Folder]) -> List[FolderDTO]:
        """Convert list of entities to DTOs."""
        return [FolderMapper.to_dto(folder) for folder in folders]
