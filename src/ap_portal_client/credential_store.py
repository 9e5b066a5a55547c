"""Credential store implementations.

The store is the single source of truth for the client session. Writes always
replace the whole session, so a reader never observes a token from one login
paired with the user of another.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ap_portal_client.logging_utils import create_client_logger
from ap_portal_client.models.auth import Session

logger = create_client_logger("credential_store")


class InMemoryCredentialStore:
    """Process-local credential store."""

    def __init__(self) -> None:
        self._session = Session()

    def set(self, token: str | None, user: dict[str, Any] | None) -> None:
        self._session = Session(token=token, user=user)

    def clear(self) -> None:
        self._session = Session()

    def get_token(self) -> str | None:
        return self._session.token

    def get_user(self) -> dict[str, Any] | None:
        return self._session.user

    def get_session(self) -> Session:
        return self._session


class JsonFileCredentialStore:
    """Credential store persisted to a JSON file.

    The file survives process restarts. Unreadable or unwritable files degrade
    to an empty session and are reported through the log; no method raises.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._session = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def set(self, token: str | None, user: dict[str, Any] | None) -> None:
        self._session = Session(token=token, user=user)
        self._write(self._session)

    def clear(self) -> None:
        self._session = Session()
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to remove session file", path=str(self._path), error=str(e))
            # A token left on disk would be reloaded on the next start.
            self._write(self._session)

    def get_token(self) -> str | None:
        return self._session.token

    def get_user(self) -> dict[str, Any] | None:
        return self._session.user

    def get_session(self) -> Session:
        return self._session

    def _load(self) -> Session:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return Session()
        except OSError as e:
            logger.warning("Failed to read session file", path=str(self._path), error=str(e))
            return Session()

        try:
            return Session.model_validate(json.loads(raw.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("Discarding corrupt session file", path=str(self._path), error=str(e))
            return Session()

    def _write(self, session: Session) -> None:
        try:
            payload = session.model_dump_json()
        except PydanticSerializationError as e:
            logger.warning(
                "Session is not serializable, keeping it in memory only",
                path=str(self._path),
                error=str(e),
            )
            return

        # Write-then-rename keeps the previous file intact if the write fails.
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as e:
            logger.warning("Failed to persist session file", path=str(self._path), error=str(e))
