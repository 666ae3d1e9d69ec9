from paper.domain.entities import (
    DEFAULT_FOLDER_DESCRIPTION,
    DEFAULT_FOLDER_NAME,
    Folder,
    FolderType,
    utc_now,
)


def test_default_system_folder_shape():
    folder = Folder.default_system_folder("user-1")

    assert folder.type == FolderType.SYSTEM_DEFINED
    assert folder.parent_id is None
    assert folder.user_id == "user-1"
    assert folder.name == DEFAULT_FOLDER_NAME
    assert folder.description == DEFAULT_FOLDER_DESCRIPTION
    assert folder.created_at == folder.updated_at
    assert folder.is_root()
    assert folder.is_system_defined()


def test_default_system_folder_ids_never_collide():
    ids = {Folder.default_system_folder("user-1").id for _ in range(100)}
    assert len(ids) == 100


def test_new_user_folder_is_user_defined():
    folder = Folder.new_user_folder("user-1", "Notes", parent_id="parent", description=None)

    assert folder.type == FolderType.USER_DEFINED
    assert folder.parent_id == "parent"
    assert folder.name == "Notes"
    assert not folder.is_root()
    assert not folder.is_system_defined()


def test_new_user_folder_without_parent_is_root():
    assert Folder.new_user_folder("user-1", "Notes").is_root()


def test_new_user_folder_keeps_empty_parent_id():
    folder = Folder.new_user_folder("user-1", "Notes", parent_id="")

    assert folder.parent_id == ""
    assert not folder.is_root()


def test_folder_type_wire_values():
    assert FolderType.SYSTEM_DEFINED.value == "system"
    assert FolderType.USER_DEFINED.value == "user"


def test_utc_now_has_millisecond_precision():
    now = utc_now()
    assert now.tzinfo is not None
    assert now.microsecond % 1000 == 0
