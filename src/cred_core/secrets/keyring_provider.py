from __future__ import annotations

import json
import threading
from typing import List, Optional

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from cred_core.errors import RecordNotFoundError, StoreError
from cred_core.secrets.secret_provider import SecretProvider

# keyring cannot enumerate entries, so the provider keeps its own key list in
# a sibling service; record keys never collide with it
INDEX_SERVICE_SUFFIX = "/__index__"
INDEX_KEY = "keys"


class KeyringSecretProvider(SecretProvider):
    """
    OS keychain-backed provider using the keyring package.
    Keeps credential records outside the DB/config files.
    """

    def __init__(self, service: str) -> None:
        self._service = service
        self._index_service = f"{service}{INDEX_SERVICE_SUFFIX}"
        self._index_lock = threading.Lock()

    @property
    def service(self) -> str:
        return self._service

    @property
    def index_service(self) -> str:
        return self._index_service

    def get(self, key: str) -> str:
        try:
            value: Optional[str] = keyring.get_password(self._service, key)
        except KeyringError as exc:
            raise StoreError(f"keyring get failed: {exc}") from exc
        if value is None:
            raise RecordNotFoundError(key)
        return value

    def set(self, key: str, secret: str) -> None:
        try:
            keyring.set_password(self._service, key, secret)
        except KeyringError as exc:
            raise StoreError(f"keyring set failed: {exc}") from exc
        with self._index_lock:
            keys = self._read_index()
            if key not in keys:
                keys.append(key)
                self._write_index(keys)

    def exists(self, key: str) -> bool:
        try:
            return keyring.get_password(self._service, key) is not None
        except KeyringError as exc:
            raise StoreError(f"keyring exists failed: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            keyring.delete_password(self._service, key)
        except PasswordDeleteError as exc:
            self._drop_from_index(key)
            raise RecordNotFoundError(key) from exc
        except KeyringError as exc:
            # record is still there, keep it listed
            raise StoreError(f"keyring delete failed: {exc}") from exc
        self._drop_from_index(key)

    def list_keys(self) -> List[str]:
        with self._index_lock:
            keys = self._read_index()
        return [k for k in keys if self.exists(k)]

    def _drop_from_index(self, key: str) -> None:
        with self._index_lock:
            keys = self._read_index()
            if key in keys:
                keys.remove(key)
                self._write_index(keys)

    def _read_index(self) -> List[str]:
        try:
            raw = keyring.get_password(self._index_service, INDEX_KEY)
        except KeyringError as exc:
            raise StoreError(f"keyring index read failed: {exc}") from exc
        if not raw:
            return []
        return list(json.loads(raw))

    def _write_index(self, keys: List[str]) -> None:
        try:
            keyring.set_password(self._index_service, INDEX_KEY, json.dumps(keys))
        except KeyringError as exc:
            raise StoreError(f"keyring index write failed: {exc}") from exc
