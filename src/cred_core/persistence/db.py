import os
import threading
import weakref
from typing import Any, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine
from sqlmodel.pool import StaticPool

from cred_core.persistence.table_definitions import SecretTable

# Force import so the table gets registered
_ = SecretTable

_SCHEMA_LOCK = threading.Lock()
_READY_ENGINES: "weakref.WeakSet[Engine]" = weakref.WeakSet()


def _set_sqlite_pragmas(dbapi_conn: Any, _: Any) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA journal_mode=WAL")
        cur.execute("PRAGMA synchronous=NORMAL")
    finally:
        cur.close()


def create_db_engine(db_path: Optional[str] = None) -> Engine:
    """
    Build a SQLite engine for `db_path`; without a path the database lives
    in memory and is shared across threads through a static pool.
    """
    if db_path:
        dir_name = os.path.dirname(db_path)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)

    url = db_path and f"sqlite:///{db_path}" or "sqlite:///:memory:"
    engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if db_path:
        event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


def ensure_schema(engine: Engine) -> None:
    """Create the credential tables on first use of `engine`."""
    if engine in _READY_ENGINES:
        return

    with _SCHEMA_LOCK:
        if engine in _READY_ENGINES:
            return
        SQLModel.metadata.create_all(engine)
        _READY_ENGINES.add(engine)
