from __future__ import annotations

import logging
from typing import Optional

from cred_core.config import CredentialSettings, load_settings
from cred_core.credentials.manager import CredentialManager
from cred_core.credentials.registry import default_registry
from cred_core.encoding import set_default_codec
from cred_core.logger.logging_setup import setup_logging
from cred_core.secrets.secret_utils import create_secret_provider, reset_memory_provider
from cred_core.storage.credential_store import SecretCredentialStore

_credential_manager_singleton: Optional[CredentialManager] = None
_logging_ready = False


def credential_manager(
    settings: Optional[CredentialSettings] = None,
) -> CredentialManager:
    global _credential_manager_singleton, _logging_ready
    if _credential_manager_singleton is None:
        settings = settings or load_settings()
        if not _logging_ready:
            setup_logging(settings)
            _logging_ready = True
        store = SecretCredentialStore(create_secret_provider(settings))
        _credential_manager_singleton = CredentialManager(
            store,
            registry=default_registry,
            default_codec=set_default_codec(settings.default_content_type),
        )
        logging.getLogger("cred_core.singletons").info(
            "Credential manager ready (backend=%s)", settings.store_backend
        )
    return _credential_manager_singleton


def reset_singletons() -> None:
    global _credential_manager_singleton
    _credential_manager_singleton = None
    reset_memory_provider()
