# tests/test_folders.py

import pytest
from sqlalchemy.orm import Session

from mindvault.errors import ConflictError, NotFoundError, ValidationError
from mindvault.models import Content, Folder
from mindvault.services import ContentDisposition, ContentService, FolderService


@pytest.fixture
def folders(session):
    return FolderService(session)


@pytest.fixture
def contents(session):
    return ContentService(session)


class TestCreate:

    def test_trims_and_defaults(self, folders, alice):
        folder = folders.create(alice, "  Work  ", description="  stuff  ")

        assert folder.name == "Work"
        assert folder.description == "stuff"
        assert folder.color == "#3B82F6"
        assert folder.created_at is not None

    def test_custom_color(self, folders, alice):
        assert folders.create(alice, "Ideas", color="#10B981").color == "#10B981"

    def test_rejects_malformed_color(self, folders, alice):
        with pytest.raises(ValidationError):
            folders.create(alice, "Ideas", color="green")

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name(self, folders, alice, name):
        with pytest.raises(ValidationError):
            folders.create(alice, name)

    def test_duplicate_trimmed_name(self, folders, alice):
        folders.create(alice, "Work")
        with pytest.raises(ConflictError):
            folders.create(alice, " Work ")

    def test_same_name_for_different_owners(self, folders, alice, bob):
        folders.create(alice, "Work")
        assert folders.create(bob, "Work").name == "Work"


class TestList:

    def test_counts_are_live(self, folders, contents, alice):
        work = folders.create(alice, "Work")
        contents.create(alice, "text", "a", text="1", folder_id=work.id)
        item = contents.create(alice, "text", "b", text="2", folder_id=work.id)

        assert folders.list(alice)[0].to_dict(include_count=True)["contentCount"] == 2

        contents.delete(alice, item.id)
        assert folders.list(alice)[0].to_dict(include_count=True)["contentCount"] == 1

    def test_scoped_to_owner(self, folders, alice, bob):
        folders.create(alice, "Work")
        folders.create(bob, "Home")

        assert [f.name for f in folders.list(alice)] == ["Work"]


class TestUpdate:

    def test_rename_and_keep_color(self, folders, alice):
        folder = folders.create(alice, "Work", color="#EF4444")

        updated = folders.update(alice, folder.id, " Office ", description="day job")

        assert updated.name == "Office"
        assert updated.description == "day job"
        assert updated.color == "#EF4444"

    def test_same_name_is_not_a_conflict(self, folders, alice):
        folder = folders.create(alice, "Work")
        assert folders.update(alice, folder.id, "Work", color="#000000").color == "#000000"

    def test_rename_collision(self, folders, alice):
        folders.create(alice, "Work")
        home = folders.create(alice, "Home")

        with pytest.raises(ConflictError):
            folders.update(alice, home.id, "Work")

    def test_blank_name(self, folders, alice):
        folder = folders.create(alice, "Work")
        with pytest.raises(ValidationError):
            folders.update(alice, folder.id, "  ")

    def test_foreign_folder(self, folders, alice, bob):
        folder = folders.create(bob, "Home")
        with pytest.raises(NotFoundError):
            folders.update(alice, folder.id, "Mine")

    def test_non_string_id(self, folders, alice):
        with pytest.raises(ValidationError):
            folders.update(alice, ["a"], "Mine")


class TestDelete:

    @pytest.fixture
    def filled(self, folders, contents, alice):
        work = folders.create(alice, "Work")
        items = [
            contents.create(alice, "text", f"note {i}", text="x", folder_id=work.id).id
            for i in range(3)
        ]
        return work.id, items

    def test_root_disposition(self, folders, session, alice, filled):
        folder_id, items = filled

        affected = folders.delete(alice, folder_id, ContentDisposition.from_query("root"))

        assert affected == 3
        assert session.get(Folder, folder_id) is None
        assert all(session.get(Content, item).folder_id is None for item in items)

    def test_move_disposition(self, folders, session, alice, filled):
        folder_id, items = filled
        target = folders.create(alice, "Archive")

        folders.delete(alice, folder_id, ContentDisposition.from_query(target.id))

        assert session.get(Folder, folder_id) is None
        assert all(session.get(Content, item).folder_id == target.id for item in items)

    def test_move_to_foreign_folder_changes_nothing(self, folders, session, alice, bob, filled):
        folder_id, items = filled
        bobs = folders.create(bob, "Bob's")

        with pytest.raises(NotFoundError):
            folders.delete(alice, folder_id, ContentDisposition.from_query(f"moveTo:{bobs.id}"))

        assert session.get(Folder, folder_id) is not None
        assert all(session.get(Content, item).folder_id == folder_id for item in items)

    def test_move_into_itself_is_rejected(self, folders, alice, filled):
        folder_id, _ = filled
        with pytest.raises(ValidationError):
            folders.delete(alice, folder_id, ContentDisposition.from_query(folder_id))

    def test_default_deletes_content(self, folders, contents, session, alice, filled):
        folder_id, items = filled
        loose = contents.create(alice, "text", "loose", text="x")

        affected = folders.delete(alice, folder_id)

        assert affected == 3
        assert session.get(Folder, folder_id) is None
        assert all(session.get(Content, item) is None for item in items)
        assert [c.id for c in contents.list(alice)] == [loose.id]

    def test_foreign_folder(self, folders, alice, bob):
        folder = folders.create(bob, "Home")
        with pytest.raises(NotFoundError):
            folders.delete(alice, folder.id, ContentDisposition.from_query("root"))

    def test_failure_rolls_back_disposition(self, folders, session, alice, filled, monkeypatch):
        folder_id, items = filled

        def broken_delete(self, instance):
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(Session, "delete", broken_delete)

        with pytest.raises(RuntimeError):
            folders.delete(alice, folder_id, ContentDisposition.from_query("root"))

        monkeypatch.undo()
        assert session.get(Folder, folder_id) is not None
        assert all(session.get(Content, item).folder_id == folder_id for item in items)


class TestDisposition:

    @pytest.mark.parametrize("value,action,target", [
        (None, ContentDisposition.DELETE, None),
        ("", ContentDisposition.DELETE, None),
        ("root", ContentDisposition.ROOT, None),
        ("abc", ContentDisposition.MOVE, "abc"),
        ("moveTo:abc", ContentDisposition.MOVE, "abc"),
    ])
    def test_from_query(self, value, action, target):
        disposition = ContentDisposition.from_query(value)
        assert disposition.action == action
        assert disposition.target_folder_id == target


class TestFolderEndpoints:

    def test_crud(self, client, signup):
        headers = signup("alice")

        created = client.post("/api/v1/folders", headers=headers, json={"name": "Work"})
        assert created.status_code == 200
        folder = created.get_json()["folder"]
        assert folder["color"] == "#3B82F6"

        assert client.post("/api/v1/folders", headers=headers, json={"name": "Work"}).status_code == 409
        assert client.post("/api/v1/folders", headers=headers, json={"name": " "}).status_code == 400

        client.post("/api/v1/content", headers=headers, json={
            "type": "text", "title": "a", "text": "x", "folderId": folder["id"],
        })
        listed = client.get("/api/v1/folders", headers=headers).get_json()["folders"]
        assert listed[0]["contentCount"] == 1

        renamed = client.put(f"/api/v1/folders/{folder['id']}", headers=headers, json={"name": "Office"})
        assert renamed.status_code == 200
        assert renamed.get_json()["folder"]["name"] == "Office"
        assert client.put("/api/v1/folders/missing", headers=headers, json={"name": "x"}).status_code == 404

        deleted = client.delete(f"/api/v1/folders/{folder['id']}?moveContent=root", headers=headers)
        assert deleted.status_code == 200
        contents = client.get("/api/v1/content?folderId=root", headers=headers).get_json()["contents"]
        assert len(contents) == 1

    def test_non_object_body(self, client, signup):
        headers = signup("alice")

        response = client.post("/api/v1/folders", headers=headers, json=["a"])
        assert response.status_code == 400
        assert response.get_json()["error"] == "VALIDATION_ERROR"
        assert client.put("/api/v1/folders/missing", headers=headers, json=42).status_code == 400
        assert client.post("/api/v1/brain/share", headers=headers, json=[True]).status_code == 400

    def test_delete_with_missing_target(self, client, signup):
        headers = signup("alice")
        folder = client.post("/api/v1/folders", headers=headers, json={"name": "Work"}).get_json()["folder"]

        response = client.delete(f"/api/v1/folders/{folder['id']}?moveContent=missing", headers=headers)

        assert response.status_code == 404
        assert len(client.get("/api/v1/folders", headers=headers).get_json()["folders"]) == 1
