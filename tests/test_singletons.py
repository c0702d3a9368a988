from unittest.mock import patch

import pytest

from cred_core import singletons
from cred_core.config import CredentialSettings
from cred_core.encoding import JSON, YAML, get_default_codec, set_default_codec
from cred_core.secrets.keyring_provider import KeyringSecretProvider
from cred_core.secrets.memory_provider import InMemorySecretProvider
from cred_core.secrets.secret_utils import create_secret_provider
from cred_core.secrets.sql_provider import SqlSecretProvider


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch):
    singletons.reset_singletons()
    monkeypatch.setattr(singletons, "_logging_ready", False)
    with patch("cred_core.singletons.setup_logging"):
        yield
    singletons.reset_singletons()
    set_default_codec(JSON)


def test_manager_is_cached():
    first = singletons.credential_manager(CredentialSettings())
    second = singletons.credential_manager()
    assert first is second
    assert first.default_codec is JSON


def test_manager_uses_configured_codec_and_backend():
    manager = singletons.credential_manager(
        CredentialSettings(store_backend="sql", default_content_type="yaml")
    )
    assert manager.default_codec is YAML
    assert isinstance(manager.store.backend, SqlSecretProvider)


def test_configured_content_type_becomes_process_default():
    singletons.credential_manager(
        CredentialSettings(default_content_type="application/yaml")
    )
    assert get_default_codec() is YAML


def test_logging_is_set_up_from_the_same_settings():
    settings = CredentialSettings(log_level="DEBUG")
    with patch("cred_core.singletons.setup_logging") as setup:
        singletons.credential_manager(settings)
    setup.assert_called_once_with(settings)


def test_reset_drops_memory_backend():
    first = singletons.credential_manager(CredentialSettings())
    singletons.reset_singletons()
    second = singletons.credential_manager(CredentialSettings())
    assert first.store.backend is not second.store.backend


class TestCreateSecretProvider:
    def test_memory_is_shared(self):
        a = create_secret_provider(CredentialSettings(store_backend="memory"))
        b = create_secret_provider(CredentialSettings(store_backend="memory"))
        assert isinstance(a, InMemorySecretProvider)
        assert a is b

    def test_keyring(self):
        provider = create_secret_provider(
            CredentialSettings(store_backend="keyring", keyring_service="svc")
        )
        assert isinstance(provider, KeyringSecretProvider)
        assert provider.service == "svc"

    def test_sql(self, tmp_path):
        provider = create_secret_provider(
            CredentialSettings(store_backend="sql", db_path=str(tmp_path / "c.db"))
        )
        assert isinstance(provider, SqlSecretProvider)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="CRED_STORE_BACKEND"):
            create_secret_provider(CredentialSettings(store_backend="vault"))
