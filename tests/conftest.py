from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

from cred_core.credentials.manager import CredentialManager
from cred_core.credentials.registry import ProvisionerRegistry
from cred_core.encoding import JSON
from cred_core.secrets.memory_provider import InMemorySecretProvider
from cred_core.storage.credential_store import SecretCredentialStore
from tests.provisioners import AwsCredential, AzureCredential

_TEST_LOG_DIR = Path(tempfile.mkdtemp(prefix="cred-core-logs-")).resolve()
os.environ.setdefault("CRED_LOG_DIR", str(_TEST_LOG_DIR))


@pytest.fixture
def registry() -> ProvisionerRegistry:
    """Fresh registry with the aws and azure test provisioners."""
    reg = ProvisionerRegistry()
    reg.register("aws", AwsCredential)
    reg.register("azure", AzureCredential)
    return reg


@pytest.fixture
def backend() -> InMemorySecretProvider:
    return InMemorySecretProvider()


@pytest.fixture
def store(backend: InMemorySecretProvider) -> SecretCredentialStore:
    return SecretCredentialStore(backend)


@pytest.fixture
def manager(
    store: SecretCredentialStore, registry: ProvisionerRegistry
) -> CredentialManager:
    return CredentialManager(store, registry=registry)


@pytest.fixture
def aws_bytes():
    """Encode an aws credential with the default (JSON) codec."""

    def _encode(access_key: str, secret_key: str) -> bytes:
        return JSON.marshal(
            AwsCredential(access_key=access_key, secret_key=secret_key)
        )

    return _encode
