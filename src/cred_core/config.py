from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv
from starlette.config import Config

from cred_core.encoding import codec_for
from cred_core.errors import UnsupportedContentTypeError

logger = logging.getLogger(__name__)

STORE_BACKENDS = ("memory", "keyring", "sql")
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_LOG_CONFIG = "logging_config.yaml"


@dataclass(frozen=True)
class CredentialSettings:
    store_backend: str = "memory"
    keyring_service: str = "cred-core/default"
    db_path: Optional[str] = None
    default_content_type: str = DEFAULT_CONTENT_TYPE
    log_config: str = DEFAULT_LOG_CONFIG
    log_dir: Optional[str] = None
    log_level: str = "INFO"


def load_settings(config: Optional[Config] = None) -> CredentialSettings:
    """
    Read settings from `config`; without one, the process environment
    (plus a `.env` file if present) is used.
    """
    if config is None:
        load_dotenv()
        config = Config()

    store_backend = (
        config("CRED_STORE_BACKEND", cast=str, default="memory").strip().lower()
    )
    if store_backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"CRED_STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, "
            f"got {store_backend!r}"
        )

    keyring_service = config(
        "CRED_KEYRING_SERVICE", cast=str, default="cred-core/default"
    ).strip()
    if not keyring_service:
        raise RuntimeError("CRED_KEYRING_SERVICE must not be empty")

    db_path = config("CRED_DB_PATH", default=None) or None

    default_content_type = config(
        "CRED_DEFAULT_CONTENT_TYPE", cast=str, default=DEFAULT_CONTENT_TYPE
    ).strip()

    try:
        codec_for(default_content_type)
    except UnsupportedContentTypeError as exc:
        raise RuntimeError(f"CRED_DEFAULT_CONTENT_TYPE: {exc}") from exc

    log_config = config(
        "CRED_LOG_CONFIG", cast=str, default=DEFAULT_LOG_CONFIG
    ).strip()
    log_dir = config("CRED_LOG_DIR", default=None) or None

    log_level = config("CRED_LOG_LEVEL", cast=str, default="INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"CRED_LOG_LEVEL is not a logging level: {log_level!r}")

    logger.info(
        "Credential store configured with backend=%s and default content type=%s",
        store_backend,
        default_content_type,
    )

    return CredentialSettings(
        store_backend=store_backend,
        keyring_service=keyring_service,
        db_path=db_path,
        default_content_type=default_content_type,
        log_config=log_config,
        log_dir=log_dir,
        log_level=log_level,
    )


__all__ = ["CredentialSettings", "load_settings", "STORE_BACKENDS"]
