from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel

from cred_core.credentials.models import CredentialBase
from cred_core.encoding import JSON, Codec
from cred_core.secrets.secret_provider import SecretProvider


class CredentialStore(ABC):
    """
    Backing store of the credential manager. The store holds exactly one
    encoded representation per key and knows nothing about provisioners.
    """

    @abstractmethod
    def list(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def save(self, key: str, shape: BaseModel) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, key: str, target: CredentialBase) -> None:
        """
        Populate `target` from the record stored at `key`.
        Raise RecordNotFoundError if absent, CodecError if undecodable.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError


class SecretCredentialStore(CredentialStore):
    """
    Encodes credentials with `codec` (JSON unless told otherwise) and keeps
    the text in a SecretProvider backend.
    """

    def __init__(self, backend: SecretProvider, codec: Optional[Codec] = None) -> None:
        self.backend = backend
        self.codec = codec or JSON

    def list(self) -> List[str]:
        return self.backend.list_keys()

    def save(self, key: str, shape: BaseModel) -> None:
        self.backend.set(key, self.codec.marshal(shape).decode("utf-8"))

    def get(self, key: str, target: CredentialBase) -> None:
        self.codec.unmarshal(self.backend.get(key).encode("utf-8"), target)

    def delete(self, key: str) -> None:
        self.backend.delete(key)
