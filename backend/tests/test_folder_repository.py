import uuid
from dataclasses import replace

import pytest

from paper.domain.entities import Folder, FolderType, utc_now
from paper.domain.exceptions import PersistenceError
from paper.repositories import FolderRepository


def make_folder(user_id: str = "user-1", name: str = "Notes", parent_id=None) -> Folder:
    return Folder.new_user_folder(user_id, name, parent_id=parent_id, description="desc")


@pytest.mark.asyncio
async def test_create_then_get_returns_equal_folder(repository):
    folder = make_folder()
    await repository.create_folder(folder)

    assert await repository.get_folder_by_id(folder.id) == folder


@pytest.mark.asyncio
async def test_empty_parent_id_round_trips_unchanged(repository, memory_db):
    folder = make_folder(parent_id="")
    await repository.create_folder(folder)

    assert (await memory_db.find_folder(folder.id))["parent_id"] == ""
    stored = await repository.get_folder_by_id(folder.id)
    assert stored.parent_id == ""
    assert not stored.is_root()


@pytest.mark.asyncio
async def test_get_unknown_id_returns_none(repository):
    assert await repository.get_folder_by_id(str(uuid.uuid4())) is None


@pytest.mark.asyncio
async def test_create_duplicate_id_raises_persistence_error(repository):
    folder = make_folder()
    await repository.create_folder(folder)

    with pytest.raises(PersistenceError):
        await repository.create_folder(replace(folder, name="Other"))


@pytest.mark.asyncio
async def test_get_folders_by_user_id_returns_only_that_users_folders(repository):
    mine = [make_folder("alice", "b"), make_folder("alice", "a"), make_folder("alice", "c")]
    theirs = make_folder("bob", "a")
    for folder in [mine[2], theirs, mine[0], mine[1]]:
        await repository.create_folder(folder)

    result = await repository.get_folders_by_user_id("alice")

    assert sorted(f.id for f in result) == sorted(f.id for f in mine)
    assert await repository.get_folders_by_user_id("nobody") == []


@pytest.mark.asyncio
async def test_update_replaces_all_mutable_fields(repository):
    folder = make_folder()
    await repository.create_folder(folder)

    changed = replace(
        folder,
        name="Renamed",
        description=None,
        parent_id="some-parent",
        updated_at=utc_now()
    )
    returned = await repository.update_folder(changed)

    assert returned == changed
    assert await repository.get_folder_by_id(folder.id) == changed


@pytest.mark.asyncio
async def test_update_missing_folder_is_silent_and_creates_nothing(repository):
    folder = make_folder()

    returned = await repository.update_folder(folder)

    assert returned == folder
    assert await repository.get_folder_by_id(folder.id) is None


@pytest.mark.asyncio
async def test_delete_then_get_returns_none(repository):
    folder = make_folder()
    await repository.create_folder(folder)

    await repository.delete_folder(folder.id)

    assert await repository.get_folder_by_id(folder.id) is None


@pytest.mark.asyncio
async def test_delete_missing_folder_is_silent(repository):
    await repository.delete_folder("does-not-exist")
    assert await repository.get_folder_by_id("does-not-exist") is None


@pytest.mark.asyncio
async def test_create_index_is_idempotent(repository, memory_db):
    await repository.create_index()
    await repository.create_index()

    assert memory_db.get_indexes() == [("user_id", "name")]


@pytest.mark.asyncio
async def test_deleting_parent_leaves_children_orphaned(repository):
    default = Folder.default_system_folder("U")
    await repository.create_folder(default)
    notes = make_folder("U", "Notes", parent_id=default.id)
    await repository.create_folder(notes)

    assert len(await repository.get_folders_by_user_id("U")) == 2

    await repository.delete_folder(default.id)

    remaining = await repository.get_folders_by_user_id("U")
    assert len(remaining) == 1
    assert remaining[0].name == "Notes"
    assert remaining[0].parent_id == default.id
    assert remaining[0].type == FolderType.USER_DEFINED


@pytest.mark.asyncio
async def test_returned_folders_are_detached_from_storage(repository):
    folder = make_folder()
    await repository.create_folder(folder)

    loaded = await repository.get_folder_by_id(folder.id)
    loaded.name = "mutated locally"

    assert (await repository.get_folder_by_id(folder.id)).name == folder.name


class FailingAdapter:
    """Adapter whose every call fails like an unreachable backend."""

    async def _fail(self, *args, **kwargs):
        raise PersistenceError("connection refused")

    insert_folder = find_folder = find_folders_by_user = _fail
    set_folder = delete_folder = create_folder_index = _fail


@pytest.mark.asyncio
async def test_backend_errors_propagate_unchanged():
    repository = FolderRepository(FailingAdapter())
    folder = make_folder()

    with pytest.raises(PersistenceError):
        await repository.create_folder(folder)
    with pytest.raises(PersistenceError):
        await repository.get_folder_by_id(folder.id)
    with pytest.raises(PersistenceError):
        await repository.get_folders_by_user_id("user-1")
    with pytest.raises(PersistenceError):
        await repository.update_folder(folder)
    with pytest.raises(PersistenceError):
        await repository.delete_folder(folder.id)
    with pytest.raises(PersistenceError):
        await repository.create_index()
