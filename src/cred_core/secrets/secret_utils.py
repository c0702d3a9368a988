from typing import Optional

from cred_core.config import CredentialSettings, load_settings
from cred_core.persistence.db import create_db_engine
from cred_core.secrets.keyring_provider import KeyringSecretProvider
from cred_core.secrets.memory_provider import InMemorySecretProvider
from cred_core.secrets.secret_provider import SecretProvider
from cred_core.secrets.sql_provider import SqlSecretProvider

_MEMORY_PROVIDER_SINGLETON: Optional[InMemorySecretProvider] = None


def create_secret_provider(
    settings: Optional[CredentialSettings] = None,
) -> SecretProvider:
    """
    Decide the record backend at runtime from `settings`
    (loaded from the environment when omitted).
    """
    settings = settings or load_settings()
    backend = settings.store_backend

    if backend == "memory":
        global _MEMORY_PROVIDER_SINGLETON
        if _MEMORY_PROVIDER_SINGLETON is None:
            _MEMORY_PROVIDER_SINGLETON = InMemorySecretProvider()
        return _MEMORY_PROVIDER_SINGLETON

    if backend == "keyring":
        return KeyringSecretProvider(service=settings.keyring_service)

    if backend == "sql":
        return SqlSecretProvider(create_db_engine(settings.db_path))

    raise ValueError(f"Unsupported CRED_STORE_BACKEND={backend!r}")


def reset_memory_provider() -> None:
    global _MEMORY_PROVIDER_SINGLETON
    _MEMORY_PROVIDER_SINGLETON = None
