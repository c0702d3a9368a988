from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    UNKNOWN_PROVISIONER = "unknown_provisioner"


class CredentialError(Exception):
    """
    Raised by the credential manager.

    `code` identifies the failure kind, `message` is the human readable text.
    Wrapped codec/store failures carry no code.
    """

    code: Optional[ErrorCode] = None

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class DuplicateCredentialError(CredentialError):
    """A credential already exists under the requested key."""

    code = ErrorCode.DUPLICATE


class CredentialNotFoundError(CredentialError):
    """No credential is stored under the requested key."""

    code = ErrorCode.NOT_FOUND


class UnknownProvisionerError(CredentialError):
    """No credential factory is registered for a provisioner name."""

    code = ErrorCode.UNKNOWN_PROVISIONER

    def __init__(self, provisioner_name: str) -> None:
        super().__init__(f"Unknown provisioner: {provisioner_name!r}")
        self.provisioner_name = provisioner_name


class CodecError(Exception):
    """Malformed bytes or a payload that does not fit the target shape."""


class UnsupportedContentTypeError(CodecError):
    """No codec is registered for a content type."""


class StoreError(Exception):
    """Base for all credential store failures."""


class RecordNotFoundError(StoreError, KeyError):
    """The store holds no record under the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Credential record not found for key='{self.key}'."
