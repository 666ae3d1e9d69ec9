"""
Service Interfaces Module - Define contracts for business logic services.

Each interface is in its own file for better organization and maintainability.
"""
from .ifolder_service import IFolderService

__all__ = [
    "IFolderService",
]
