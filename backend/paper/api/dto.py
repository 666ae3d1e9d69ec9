"""
Data Transfer Objects (DTOs) for API layer.
Separates API contracts from domain entities.
Wire field names are camelCase; Python attributes stay snake_case.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional

from ..domain.entities import FolderType


class CamelModel(BaseModel):
    """Base model serializing to and parsing from camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class FolderDTO(CamelModel):
    """Folder DTO for API responses."""
    id: str
    parent_id: Optional[str] = None
    name: str
    description: Optional[str] = None
    type: FolderType


class CreateFolderRequestDTO(CamelModel):
    """
    Create Folder request.
    The created folder is always user-defined; a null parentId puts it at the root.
    """
    parent_id: Optional[str] = Field(default=None, examples=["parent-folder-uuid"])
    name: str = Field(..., examples=["folder-name"])
    description: Optional[str] = Field(default=None, examples=["This is a folder description."])


class UpdateFolderRequestDTO(CamelModel):
    """Update Folder request. Only supplied fields override the stored ones."""
    parent_id: Optional[str] = Field(default=None, examples=["parent-folder-uuid"])
    name: Optional[str] = Field(default=None, examples=["folder-name"])
    description: Optional[str] = Field(default=None, examples=["This is a folder description."])


class ErrorResponseDTO(BaseModel):
    """Error response DTO."""
    error: str
    status_code: int
    path: Optional[str] = None
    request_id: Optional[str] = None
