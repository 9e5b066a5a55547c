"""Unit tests for credential store implementations."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

from ap_portal_client.credential_store import InMemoryCredentialStore, JsonFileCredentialStore
from ap_portal_client.models.auth import Session


class TestInMemoryCredentialStore:
    def test_starts_empty(self) -> None:
        store = InMemoryCredentialStore()

        assert store.get_token() is None
        assert store.get_user() is None
        assert store.get_session() == Session()

    def test_set_replaces_whole_session(self) -> None:
        store = InMemoryCredentialStore()
        store.set("t1", {"username": "a"})

        store.set("t2", None)

        assert store.get_token() == "t2"
        assert store.get_user() is None

    def test_clear_is_idempotent(self) -> None:
        store = InMemoryCredentialStore()
        store.set("t1", {"username": "a"})

        store.clear()
        store.clear()

        assert store.get_session().is_authenticated is False


class TestJsonFileCredentialStore:
    def test_session_survives_reload(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        JsonFileCredentialStore(path).set("t1", {"username": "admin", "role": "ADMIN"})

        reloaded = JsonFileCredentialStore(path)

        assert reloaded.get_token() == "t1"
        assert reloaded.get_user() == {"username": "admin", "role": "ADMIN"}

    def test_clear_removes_file_and_is_idempotent(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        store = JsonFileCredentialStore(path)
        store.set("t1", None)

        store.clear()
        store.clear()

        assert not path.exists()
        assert store.get_token() is None

    def test_corrupt_file_degrades_to_empty_session(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")

        store = JsonFileCredentialStore(path)

        assert store.get_session() == Session()

    def test_unexpected_shape_degrades_to_empty_session(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_text(json.dumps({"token": 123}), encoding="utf-8")

        store = JsonFileCredentialStore(path)

        assert store.get_token() is None

    def test_unwritable_location_does_not_raise(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileCredentialStore(blocker / "session.json")

        store.set("t1", None)

        assert store.get_token() == "t1"

    def test_non_utf8_file_degrades_to_empty_session(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        store = JsonFileCredentialStore(path)

        assert store.get_session() == Session()

    def test_unserializable_user_does_not_raise(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        store = JsonFileCredentialStore(path)

        store.set("t1", {"avatar": object()})

        assert store.get_token() == "t1"
        assert not path.exists()

    def test_failed_unlink_overwrites_persisted_token(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        store = JsonFileCredentialStore(path)
        store.set("t1", {"username": "admin"})

        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            store.clear()

        assert store.get_token() is None
        assert JsonFileCredentialStore(path).get_session() == Session()
