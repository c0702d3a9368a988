from .manager import CredentialManager
from .models import Credential, CredentialBase
from .registry import (
    ProvisionerRegistry,
    default_registry,
    register_credentialer,
    register_provisioner,
)

__all__ = [
    "Credential",
    "CredentialBase",
    "CredentialManager",
    "ProvisionerRegistry",
    "default_registry",
    "register_credentialer",
    "register_provisioner",
]
