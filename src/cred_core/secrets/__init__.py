from .keyring_provider import KeyringSecretProvider
from .memory_provider import InMemorySecretProvider
from .secret_provider import SecretProvider
from .sql_provider import SqlSecretProvider

__all__ = [
    "KeyringSecretProvider",
    "InMemorySecretProvider",
    "SecretProvider",
    "SqlSecretProvider",
]
