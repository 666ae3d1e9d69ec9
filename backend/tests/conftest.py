import os

# Must be set before paper.core.config is imported
os.environ["DATABASE_TYPE"] = "memory"
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from paper.core.auth import create_access_token
from paper.repositories import FolderRepository
from paper.services.database import MemoryAdapter
from paper.services.folder_service import FolderService


@pytest.fixture
def memory_db():
    return MemoryAdapter()


@pytest.fixture
def repository(memory_db):
    return FolderRepository(memory_db)


@pytest.fixture
def folder_service(repository):
    return FolderService(repository)


@pytest.fixture
def client():
    from paper.main import app

    # Entering the context runs the startup (and shutdown) events
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    def _headers(user_id: str = "user-1") -> dict:
        return {"Authorization": f"Bearer {create_access_token(user_id)}"}
    return _headers
