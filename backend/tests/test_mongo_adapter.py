from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from paper.domain.exceptions import PersistenceError
from paper.services.database import DatabaseFactory, MemoryAdapter, MongoAdapter


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def adapter(collection):
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = collection
    return MongoAdapter("mongodb://unused", "paper", "folders", client=client)


@pytest.mark.asyncio
async def test_insert_folder_uses_insert_one(adapter, collection):
    collection.insert_one = AsyncMock()
    doc = {"_id": "f1", "user_id": "u1", "name": "Notes"}

    await adapter.insert_folder(doc)

    collection.insert_one.assert_awaited_once_with(doc)


@pytest.mark.asyncio
async def test_duplicate_key_becomes_persistence_error(adapter, collection):
    collection.insert_one = AsyncMock(side_effect=DuplicateKeyError("E11000 duplicate key"))

    with pytest.raises(PersistenceError) as exc_info:
        await adapter.insert_folder({"_id": "f1"})

    assert isinstance(exc_info.value.__cause__, DuplicateKeyError)


@pytest.mark.asyncio
async def test_find_folder_filters_on_id(adapter, collection):
    collection.find_one = AsyncMock(return_value=None)

    assert await adapter.find_folder("f1") is None
    collection.find_one.assert_awaited_once_with({"_id": "f1"})


@pytest.mark.asyncio
async def test_find_folders_by_user_collects_cursor(adapter, collection):
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[{"_id": "f1"}, {"_id": "f2"}])
    collection.find = MagicMock(return_value=cursor)

    result = await adapter.find_folders_by_user("u1")

    assert result == [{"_id": "f1"}, {"_id": "f2"}]
    collection.find.assert_called_once_with({"user_id": "u1"})


@pytest.mark.asyncio
async def test_set_folder_sets_whole_document_without_id(adapter, collection):
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=0))

    matched = await adapter.set_folder("f1", {"_id": "f1", "name": "x", "description": None})

    assert matched is False
    collection.update_one.assert_awaited_once_with(
        {"_id": "f1"}, {"$set": {"name": "x", "description": None}}
    )


@pytest.mark.asyncio
async def test_delete_folder_reports_deleted_count(adapter, collection):
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))

    assert await adapter.delete_folder("f1") is True
    collection.delete_one.assert_awaited_once_with({"_id": "f1"})


@pytest.mark.asyncio
async def test_create_folder_index_is_compound_and_non_unique(adapter, collection):
    collection.create_index = AsyncMock(return_value="user_id_1_name_1")

    await adapter.create_folder_index()

    args, kwargs = collection.create_index.call_args
    assert args[0] == [("user_id", ASCENDING), ("name", ASCENDING)]
    assert "unique" not in kwargs


@pytest.mark.asyncio
async def test_unreachable_server_becomes_persistence_error(adapter, collection):
    collection.find_one = AsyncMock(side_effect=ServerSelectionTimeoutError("timed out"))

    with pytest.raises(PersistenceError):
        await adapter.find_folder("f1")


def test_factory_creates_memory_adapter():
    assert isinstance(DatabaseFactory.create("memory"), MemoryAdapter)


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        DatabaseFactory.create("postgres")
