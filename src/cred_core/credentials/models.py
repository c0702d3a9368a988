"""
Credential shapes.

Every serialized credential carries a `provisioner` discriminator. Decoding
into `CredentialBase` reads only that field; provisioner packages subclass
`Credential` with their own fields:

    @register_provisioner("aws")
    class AwsCredential(Credential):
        provisioner: Literal["aws"] = "aws"
        access_key: str = ""
        secret_key: str = ""

All fields of a concrete credential need defaults so that the registered
factory can allocate an empty value before it is populated by a codec.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class CredentialBase(BaseModel):
    """Discriminator-only view of a serialized credential."""

    model_config = ConfigDict(extra="ignore")

    provisioner: str = ""

    def provisioner_name(self) -> str:
        return self.provisioner

    def populate(self, payload: Mapping[str, Any]) -> None:
        """
        Validate `payload` against this model's type and copy the result
        onto this instance. Raises pydantic.ValidationError and leaves the
        instance untouched if the payload does not fit.
        """
        validated = type(self).model_validate(dict(payload))
        for name in type(self).model_fields:
            setattr(self, name, getattr(validated, name))


class Credential(CredentialBase):
    """Base class for provisioner specific credentials."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provisioner={self.provisioner!r}, ...)"

    __str__ = __repr__
