from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Tuple

from pydantic import BaseModel, ValidationError

from cred_core.errors import CodecError

if TYPE_CHECKING:
    from cred_core.credentials.models import CredentialBase


class Codec(ABC):
    """
    Serialization strategy for credential shapes, selected by content type.
    Codecs are stateless and shape-agnostic: they encode whatever model they
    are given and decode into whatever target they are handed.
    """

    content_type: str = ""
    aliases: Tuple[str, ...] = ()

    @abstractmethod
    def dumps(self, document: Any) -> bytes:
        """Encode a plain python document."""
        raise NotImplementedError

    @abstractmethod
    def loads(self, data: bytes) -> Any:
        """
        Decode bytes into a plain python document.
        Raise CodecError for malformed input.
        """
        raise NotImplementedError

    def marshal(self, credential: BaseModel) -> bytes:
        return self.dumps(credential.model_dump(mode="json"))

    def unmarshal(self, data: bytes, target: CredentialBase) -> None:
        """Decode `data` and populate `target` in place."""
        document = self.loads(data)
        if not isinstance(document, dict):
            raise CodecError(
                f"{self.content_type} payload must be a mapping, "
                f"got {type(document).__name__}"
            )
        try:
            target.populate(document)
        except ValidationError as exc:
            raise CodecError(str(exc)) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(content_type={self.content_type!r})"
