from __future__ import annotations

import logging
from typing import Any, Sequence

import polars as pl
import sqlalchemy as sa

from orabulk.columns import ParameterBinding, describe_columns, project_batch
from orabulk.exceptions import BindCountError
from orabulk.planner import plan_batches
from orabulk.sql import build_insert_sql
from orabulk.types import DbType

logger = logging.getLogger(__name__)


class ArrayBindCommand:
    """One array-bind statement over a DBAPI (python-oracledb) cursor.

    Parameters are added column-major, one array per positional bind, and sent in a single
    `cursor.executemany()` round trip.
    """

    def __init__(self, cursor: Any, text: str = '', array_bind_count: int = 0):
        self._cursor = cursor
        self.text = text
        self.array_bind_count = array_bind_count
        self._parameters: list[ParameterBinding] = []

    @property
    def parameters(self) -> list[ParameterBinding]:
        return list(self._parameters)

    def add_parameter(self, db_type: DbType, values: Sequence[Any]) -> None:
        self.add_binding(ParameterBinding(db_type=db_type, values=values))

    def add_binding(self, binding: ParameterBinding) -> None:
        """Bind the next positional marker. The value array is used as-is, not copied."""
        self._parameters.append(binding)

    def _check_bind_counts(self) -> None:
        if self.array_bind_count < 0:
            raise BindCountError('array_bind_count must be a non-negative integer')
        for i, p in enumerate(self._parameters, start=1):
            if len(p) != self.array_bind_count:
                raise BindCountError(
                    f'bind :{i} holds {len(p)} values but array_bind_count is {self.array_bind_count}'
                )

    def execute_non_query(self) -> int:
        """Execute and return the number of rows affected. A zero-row batch is a no-op."""
        if not self.text:
            raise ValueError('command text is empty')
        self._check_bind_counts()
        if self.array_bind_count == 0:
            return 0

        self._cursor.setinputsizes(*[p.db_type.oracledb_type() for p in self._parameters])
        # the DBAPI array bind takes rows; transpose the column arrays at the last moment
        rows = list(zip(*(bind_values(p) for p in self._parameters)))
        self._cursor.executemany(self.text, rows)

        rowcount = getattr(self._cursor, 'rowcount', None)
        if isinstance(rowcount, int) and rowcount >= 0:
            return rowcount
        return self.array_bind_count


def bind_values(binding: ParameterBinding) -> Sequence[Any]:
    """Values as the driver receives them for this binding's type.

    A VARCHAR2 variable only takes strings, so fallback columns (booleans, wide unsigned ints, times...)
    are rendered with `str()` here. Every other type goes through untouched.
    """
    if binding.db_type is not DbType.VARCHAR2:
        return binding.values
    if all(v is None or isinstance(v, str) for v in binding.values):
        return binding.values
    return [v if v is None or isinstance(v, str) else str(v) for v in binding.values]


def execute_batch(raw_connection: Any, sql: str, parameters: list[ParameterBinding], count: int) -> int:
    """Run one batch on a fresh cursor; driver errors propagate unchanged."""
    if count == 0:
        return 0
    cur = raw_connection.cursor()
    try:
        cmd = ArrayBindCommand(cur, sql, array_bind_count=count)
        for p in parameters:
            cmd.add_binding(p)
        return cmd.execute_non_query()
    finally:
        cur.close()


def ensure_transaction(conn: sa.Connection) -> None:
    """Begin a sqlalchemy transaction if none is open.

    Rows go through the raw DBAPI connection, which sqlalchemy does not see; without an open transaction
    the caller's `conn.commit()` would be a no-op and the rows rolled back when the connection is released.
    """
    if not conn.in_transaction():
        conn.begin()


def write_batches(raw_connection: Any, df: pl.DataFrame, *, full_table_name: str, batch_size: int = 0) -> int:
    """Plan, project and execute every batch of `df` in row order. Returns rows affected."""
    descriptors = describe_columns(df)
    sql = build_insert_sql(full_table_name, [d.name for d in descriptors])
    logger.debug('bulk insert statement: %s', sql)

    total = 0
    for offset, count in plan_batches(df.height, batch_size):
        logger.debug('inserting rows %d..%d into %s', offset, offset + count, full_table_name)
        parameters = project_batch(df, descriptors, offset, count)
        total += execute_batch(raw_connection, sql, parameters, count)
    return total


def bulk_insert_oracledb_executemany(
        conn: sa.Connection,
        df: pl.DataFrame,
        *,
        full_table_name: str,
        batch_size: int = 0,
) -> int:
    """
    Fast path for Oracle + oracledb: array binding via cursor.executemany.

    A transaction is begun on `conn` if none is open; commit/rollback stays with the caller.

    Args:
        full_table_name: e.g. '"SCHEMA"."T"'; used verbatim
        batch_size: rows per statement, 0 sends everything in one statement
    """
    ensure_transaction(conn)
    raw = conn.connection  # DBAPI connection (oracledb.Connection)
    return write_batches(raw, df, full_table_name=full_table_name, batch_size=batch_size)
