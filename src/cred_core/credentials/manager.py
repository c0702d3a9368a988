"""
Credential manager.

Stores provisioner specific credentials under caller supplied keys. Since the
store keeps one encoded record per key and the manager cannot know which
credential type to allocate before reading it, lookups decode twice: first
into CredentialBase to learn the provisioner, then into the concrete type the
provisioner registered.

Usage:
    manager = CredentialManager(SecretCredentialStore(InMemorySecretProvider()))
    manager.create_credential("aws", "prod", b'{"access_key": "..."}')
    cred = manager.get("prod")

The two reads of `get` are not transactional: an update landing between them
can be decoded with the type of the previous record.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, List, Optional, Union

from pydantic import BaseModel

from cred_core.credentials.models import Credential, CredentialBase
from cred_core.credentials.registry import ProvisionerRegistry, default_registry
from cred_core.encoding import Codec, CodecSelector, resolve_codec
from cred_core.errors import (
    CodecError,
    CredentialError,
    CredentialNotFoundError,
    DuplicateCredentialError,
    RecordNotFoundError,
    StoreError,
)

if TYPE_CHECKING:
    from cred_core.storage.credential_store import CredentialStore

CredentialInput = Union[bytes, bytearray, memoryview, str, IO[bytes], IO[str]]


def _read_input(data: CredentialInput) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raw = data.read()
    return raw.encode("utf-8") if isinstance(raw, str) else raw


class CredentialManager:
    def __init__(
        self,
        store: CredentialStore,
        registry: Optional[ProvisionerRegistry] = None,
        default_codec: Optional[Codec] = None,
    ) -> None:
        self.store = store
        self.registry = registry if registry is not None else default_registry
        self.default_codec = default_codec
        self._log = logging.getLogger("cred_core.manager")

    def new_credential(self, provisioner_name: str) -> Credential:
        """Return an empty credential for a provisioner."""
        return self.registry.new(provisioner_name)

    def unmarshal(
        self,
        data: bytes,
        credential: CredentialBase,
        content_type: CodecSelector = None,
    ) -> None:
        """
        Decode `data` onto `credential`. A None content type selects the
        manager's default codec.
        """
        resolve_codec(content_type, self.default_codec).unmarshal(data, credential)

    def marshal(
        self, credential: BaseModel, content_type: CodecSelector = None
    ) -> bytes:
        return resolve_codec(content_type, self.default_codec).marshal(credential)

    def list_ids(self) -> List[str]:
        return [str(key) for key in self.store.list()]

    def save(self, key: str, credential: Credential) -> None:
        self.store.save(key, credential)

    def get(self, key: str) -> Credential:
        base = CredentialBase()
        try:
            self.store.get(key, base)
        except RecordNotFoundError as exc:
            raise CredentialNotFoundError(f"Credential not found: {key}") from exc

        detail = self.new_credential(base.provisioner_name())
        self.store.get(key, detail)
        return detail

    def delete(self, key: str) -> None:
        self.store.delete(key)
        self._log.info("Credential %s deleted", key)

    def exists(self, key: str) -> bool:
        try:
            self.store.get(key, CredentialBase())
        except (StoreError, CodecError):
            return False
        return True

    def create_credential(
        self,
        provisioner_name: str,
        key: str,
        data: CredentialInput,
        content_type: CodecSelector = None,
    ) -> None:
        """
        Add a new credential for `provisioner_name` under `key`.
        Never overwrites: an existing key raises DuplicateCredentialError.
        """
        if self.exists(key):
            raise DuplicateCredentialError(f"Key exists: {key}")

        credential = self.new_credential(provisioner_name)
        try:
            self.unmarshal(_read_input(data), credential, content_type)
            self.save(key, credential)
        except (OSError, CodecError, StoreError) as exc:
            raise CredentialError(str(exc)) from exc

        self._log.info(
            "Credential %s created (provisioner=%s)", key, provisioner_name
        )

    def update_credential(
        self,
        key: str,
        data: CredentialInput,
        content_type: CodecSelector = None,
    ) -> None:
        """
        Replace the credential stored under `key`. The provisioner is read
        from the payload, so it may differ from the stored record's.
        """
        if not self.exists(key):
            raise CredentialNotFoundError(f"Credential not found: {key}")

        try:
            raw = _read_input(data)
            base = CredentialBase()
            self.unmarshal(raw, base, content_type)
        except (OSError, CodecError) as exc:
            raise CredentialError(str(exc)) from exc

        detail = self.new_credential(base.provisioner_name())
        try:
            self.unmarshal(raw, detail, content_type)
            self.save(key, detail)
        except (CodecError, StoreError) as exc:
            raise CredentialError(str(exc)) from exc

        self._log.info(
            "Credential %s updated (provisioner=%s)", key, base.provisioner_name()
        )
