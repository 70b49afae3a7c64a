from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine


def _bind_positional(
    sql: str, params: Sequence[object] | Mapping[str, object] | None
) -> Tuple[str, dict]:
    """Rewrite ``?`` placeholders into named binds understood by ``text()``."""
    if params is None:
        return sql, {}
    if isinstance(params, Mapping):
        return sql, dict(params)
    if not isinstance(params, Sequence) or isinstance(params, (str, bytes)):
        raise TypeError("Unsupported parameter type; expected sequence or mapping.")

    parts = sql.split("?")
    if len(parts) - 1 != len(params):
        raise ValueError(
            f"Parameter count mismatch: expected {len(parts) - 1}, got {len(params)}."
        )

    bound: dict[str, object] = {}
    rebuilt = parts[0]
    for index, (value, part) in enumerate(zip(params, parts[1:])):
        key = f"p{index}"
        rebuilt += f":{key}{part}"
        bound[key] = value
    return rebuilt, bound


class StoreConnection:
    """Thin wrapper exposing dict rows over a SQLAlchemy connection."""

    def __init__(self, connection: Connection):
        self._connection = connection

    def execute(
        self,
        sql: str,
        params: Sequence[object] | Mapping[str, object] | None = None,
    ):
        statement, bound = _bind_positional(sql, params)
        return self._connection.execute(text(statement), bound)

    def fetch_all(
        self,
        sql: str,
        params: Sequence[object] | Mapping[str, object] | None = None,
    ) -> List[Dict[str, Any]]:
        return [dict(row) for row in self.execute(sql, params).mappings().all()]

    def fetch_one(
        self,
        sql: str,
        params: Sequence[object] | Mapping[str, object] | None = None,
    ) -> Optional[Dict[str, Any]]:
        row = self.execute(sql, params).mappings().first()
        return None if row is None else dict(row)

    def fetch_scalar(
        self,
        sql: str,
        params: Sequence[object] | Mapping[str, object] | None = None,
    ) -> Any:
        return self.execute(sql, params).scalar()

    def close(self) -> None:
        self._connection.close()


@contextmanager
def transactional_connection(engine: Engine) -> Iterator[StoreConnection]:
    # Fresh connection with an explicit transaction so writes are committed
    connection = engine.connect()
    transaction = connection.begin()
    try:
        yield StoreConnection(connection)
    except Exception:
        transaction.rollback()
        raise
    else:
        transaction.commit()
    finally:
        connection.close()


@contextmanager
def read_connection(engine: Engine) -> Iterator[StoreConnection]:
    connection = engine.connect()
    try:
        yield StoreConnection(connection)
    finally:
        connection.close()
