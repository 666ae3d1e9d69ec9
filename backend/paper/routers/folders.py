"""
Folders Router - Handles folder CRUD for the authenticated user.

Architecture:
- Router handles HTTP request/response only
- Business logic delegated to FolderService
- Business exceptions are translated by the gateway's error handling

Example Usage:
    POST /folders - Create a folder
    GET /folders - List the current user's folders
    GET /folders/{folder_id} - Get one folder
    PUT /folders/{folder_id} - Update supplied fields of a folder
    DELETE /folders/{folder_id} - Delete a folder
"""
from fastapi import APIRouter, Depends, Response, status
from typing import List

from ..api.dto import CreateFolderRequestDTO, ErrorResponseDTO, FolderDTO, UpdateFolderRequestDTO
from ..api.mappers import FolderMapper
from ..core.auth import get_current_user_id
from ..services.interfaces import IFolderService
from .dependencies import get_folder_service

router = APIRouter(
    prefix="/folders",
    responses={
        401: {"description": "Missing or invalid bearer token"},
        404: {"model": ErrorResponseDTO, "description": "Folder not found"},
        500: {"model": ErrorResponseDTO, "description": "Database error"},
    }
)


@router.post("", response_model=FolderDTO, status_code=status.HTTP_201_CREATED)
async def create_folder(
    request: CreateFolderRequestDTO,
    user_id: str = Depends(get_current_user_id),
    folder_service: IFolderService = Depends(get_folder_service)
):
    """
    Create a user-defined folder.

    If parentId is null the folder is created at the root of the user's tree.
    The parent id is not checked for existence.

    Status Codes:
        201: Created
        400: Empty folder name
        401: Missing or invalid token
    """
    folder = await folder_service.create_folder(
        user_id=user_id,
        name=request.name,
        parent_id=request.parent_id,
        description=request.description
    )
    return FolderMapper.to_dto(folder)


@router.get("", response_model=List[FolderDTO])
async def list_folders(
    user_id: str = Depends(get_current_user_id),
    folder_service: IFolderService = Depends(get_folder_service)
):
    """Get every folder owned by the current user (no ordering guarantee)."""
    folders = await folder_service.list_folders(user_id)
    return FolderMapper.to_dto_list(folders)


@router.get("/{folder_id}", response_model=FolderDTO)
async def get_folder(
    folder_id: str,
    user_id: str = Depends(get_current_user_id),
    folder_service: IFolderService = Depends(get_folder_service)
):
    """
    Get a single folder by id.

    Status Codes:
        200: Success
        404: No such folder for this user
    """
    folder = await folder_service.get_folder(user_id, folder_id)
    return FolderMapper.to_dto(folder)


@router.put("/{folder_id}", response_model=FolderDTO)
async def update_folder(
    folder_id: str,
    request: UpdateFolderRequestDTO,
    user_id: str = Depends(get_current_user_id),
    folder_service: IFolderService = Depends(get_folder_service)
):
    """
    Update a folder. Fields left out (or null) keep their stored values.

    Status Codes:
        200: Success
        400: Empty folder name
        404: No such folder for this user
    """
    folder = await folder_service.update_folder(
        user_id=user_id,
        folder_id=folder_id,
        name=request.name,
        parent_id=request.parent_id,
        description=request.description
    )
    return FolderMapper.to_dto(folder)


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_folder(
    folder_id: str,
    user_id: str = Depends(get_current_user_id),
    folder_service: IFolderService = Depends(get_folder_service)
):
    """Delete a folder. Its child folders are not deleted or moved."""
    await folder_service.delete_folder(user_id, folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
