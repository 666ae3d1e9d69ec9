"""
Database abstraction layer for plug-and-play database support.
Supports MongoDB and Memory (in-memory) database backends.
"""
from .base import DatabaseInterface
from .memory_adapter import MemoryAdapter
from .mongo_adapter import MongoAdapter
from .factory import DatabaseFactory

__all__ = [
    "DatabaseInterface",
    "MemoryAdapter",
    "MongoAdapter",
    "DatabaseFactory"
]
