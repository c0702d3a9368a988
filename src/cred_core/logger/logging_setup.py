import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml

from cred_core.config import CredentialSettings, load_settings


def resolve_log_dir(settings: CredentialSettings) -> Path:
    """Directory for log files: ``CRED_LOG_DIR`` or ``./logs``."""
    if settings.log_dir:
        return Path(settings.log_dir).expanduser().resolve()
    return Path("logs").resolve()


def _redirect_file_handlers(config: dict, log_dir: Path) -> None:
    # handler filenames in the YAML are names only; the directory is per process
    file_handlers = [
        handler
        for handler in config.get("handlers", {}).values()
        if isinstance(handler, dict) and "filename" in handler
    ]
    if not file_handlers:
        return
    log_dir.mkdir(parents=True, exist_ok=True)
    for handler in file_handlers:
        handler["filename"] = str(log_dir / Path(handler["filename"]).name)


def setup_logging(settings: Optional[CredentialSettings] = None) -> bool:
    """
    Load the YAML logging configuration named by ``settings.log_config``,
    falling back to basicConfig at ``settings.log_level``.

    Returns True when the YAML file was applied.
    """
    settings = settings or load_settings()
    path = Path(settings.log_config).expanduser()
    if not path.is_file():
        logging.basicConfig(level=settings.log_level)
        return False

    with path.open("rt", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    _redirect_file_handlers(config, resolve_log_dir(settings))
    logging.config.dictConfig(config)
    return True
