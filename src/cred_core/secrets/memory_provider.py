from __future__ import annotations

import threading
from typing import Dict, List

from cred_core.errors import RecordNotFoundError
from cred_core.secrets.secret_provider import SecretProvider


class InMemorySecretProvider(SecretProvider):
    """
    Process-local, thread-safe store; use only in tests/CI.
    """

    def __init__(self) -> None:
        self._store: Dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> str:
        with self._lock:
            try:
                return self._store[key]
            except KeyError as exc:
                raise RecordNotFoundError(key) from exc

    def set(self, key: str, secret: str) -> None:
        with self._lock:
            self._store[key] = secret

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def delete(self, key: str) -> None:
        with self._lock:
            try:
                del self._store[key]
            except KeyError as exc:
                raise RecordNotFoundError(key) from exc

    def list_keys(self) -> List[str]:
        with self._lock:
            return list(self._store.keys())
