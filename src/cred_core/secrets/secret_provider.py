from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class SecretProvider(ABC):
    """
    Abstract key/value text store holding encoded credential records.
    """

    @abstractmethod
    def get(self, key: str) -> str:
        """
        Return the stored value for `key`.
        Raise RecordNotFoundError if there is none.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, secret: str) -> None:
        """
        Persist `secret` under `key`, replacing any previous value.
        """
        raise NotImplementedError

    @abstractmethod
    def exists(self, key: str) -> bool:
        """
        Check if a value exists in the store.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Delete the value for `key`.
        Raise RecordNotFoundError if there is none.
        """
        raise NotImplementedError

    @abstractmethod
    def list_keys(self) -> List[str]:
        """
        Return all stored keys.
        """
        raise NotImplementedError
