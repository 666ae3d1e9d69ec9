"""
Custom exceptions for API layer.
Separates business exceptions from HTTP exceptions.
"""
from fastapi import HTTPException, status

from ..domain.exceptions import PersistenceError


class FolderNotFoundError(Exception):
    """Raised when a folder is absent or not owned by the requesting user."""
    pass


class InvalidFolderNameError(Exception):
    """Raised when folder name is invalid."""
    pass


def is_business_exception(e: Exception) -> bool:
    return isinstance(e, (FolderNotFoundError, InvalidFolderNameError, PersistenceError))


def handle_business_exception(e: Exception) -> HTTPException:
    """
    Convert business exceptions to HTTP exceptions.
    This keeps business logic clean of HTTP concerns.
    """
    if isinstance(e, FolderNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    elif isinstance(e, InvalidFolderNameError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    elif isinstance(e, PersistenceError):
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Database error: {e}"
        )
    else:
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
