from __future__ import annotations

import logging
from typing import List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from cred_core.errors import RecordNotFoundError, StoreError
from cred_core.persistence.db import ensure_schema
from cred_core.persistence.table_definitions import SecretTable
from cred_core.secrets.secret_provider import SecretProvider


class SqlSecretProvider(SecretProvider):
    """
    Keeps encoded credential records in a SQL table (SQLite by default).
    Every call runs in its own session/transaction.
    """

    def __init__(self, engine: Engine) -> None:
        ensure_schema(engine)
        self.engine = engine
        self._log = logging.getLogger("cred_core.secrets.sql")

    def _row(self, s: Session, key: str) -> SecretTable | None:
        return s.exec(select(SecretTable).where(SecretTable.key == key)).first()

    def get(self, key: str) -> str:
        try:
            with Session(self.engine) as s:
                row = self._row(s, key)
        except SQLAlchemyError as exc:
            raise StoreError(f"sql get failed: {exc}") from exc
        if row is None:
            raise RecordNotFoundError(key)
        return row.value

    def set(self, key: str, secret: str) -> None:
        try:
            with Session(self.engine) as s:
                row = self._row(s, key)
                if row is None:
                    row = SecretTable(key=key, value=secret)
                else:
                    row.value = secret
                s.add(row)
                s.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"sql set failed: {exc}") from exc
        self._log.debug("Record %s written", key)

    def exists(self, key: str) -> bool:
        try:
            with Session(self.engine) as s:
                return self._row(s, key) is not None
        except SQLAlchemyError as exc:
            raise StoreError(f"sql exists failed: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            with Session(self.engine) as s:
                row = self._row(s, key)
                if row is None:
                    raise RecordNotFoundError(key)
                s.delete(row)
                s.commit()
        except SQLAlchemyError as exc:
            raise StoreError(f"sql delete failed: {exc}") from exc
        self._log.debug("Record %s removed", key)

    def list_keys(self) -> List[str]:
        try:
            with Session(self.engine) as s:
                return list(s.exec(select(SecretTable.key)).all())
        except SQLAlchemyError as exc:
            raise StoreError(f"sql list failed: {exc}") from exc
