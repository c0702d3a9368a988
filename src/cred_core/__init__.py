"""
Typed, provisioner scoped credential records over a pluggable key/value store.

Usage:
    from typing import Literal
    from cred_core import Credential, register_provisioner
    from cred_core.singletons import credential_manager

    @register_provisioner("aws")
    class AwsCredential(Credential):
        provisioner: Literal["aws"] = "aws"
        access_key: str = ""
        secret_key: str = ""

    manager = credential_manager()
    manager.create_credential("aws", "prod", b'{"access_key": "A", "secret_key": "B"}')
    manager.get("prod")
"""

from .credentials import (
    Credential,
    CredentialBase,
    CredentialManager,
    ProvisionerRegistry,
    default_registry,
    register_credentialer,
    register_provisioner,
)
from .errors import (
    CodecError,
    CredentialError,
    CredentialNotFoundError,
    DuplicateCredentialError,
    ErrorCode,
    RecordNotFoundError,
    StoreError,
    UnknownProvisionerError,
    UnsupportedContentTypeError,
)

__all__ = [
    "CodecError",
    "Credential",
    "CredentialBase",
    "CredentialError",
    "CredentialManager",
    "CredentialNotFoundError",
    "DuplicateCredentialError",
    "ErrorCode",
    "ProvisionerRegistry",
    "RecordNotFoundError",
    "StoreError",
    "UnknownProvisionerError",
    "UnsupportedContentTypeError",
    "default_registry",
    "register_credentialer",
    "register_provisioner",
]
