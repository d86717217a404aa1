from __future__ import annotations

import datetime as dt
import decimal
import enum
from typing import Any

import polars as pl


class ValueKind(enum.Enum):
    """Closed set of element kinds a column can carry."""

    BINARY = 'binary'
    TEXT = 'text'
    DATETIME = 'datetime'
    DECIMAL = 'decimal'
    INT32 = 'int32'
    INT64 = 'int64'
    INT16 = 'int16'
    INT8 = 'int8'
    UINT8 = 'uint8'
    FLOAT32 = 'float32'
    FLOAT64 = 'float64'
    OTHER = 'other'


class DbType(enum.Enum):
    BLOB = 'BLOB'
    VARCHAR2 = 'VARCHAR2'
    DATE = 'DATE'
    DECIMAL = 'DECIMAL'
    INT32 = 'INT32'
    INT64 = 'INT64'
    INT16 = 'INT16'
    BYTE = 'BYTE'
    SINGLE = 'SINGLE'
    DOUBLE = 'DOUBLE'

    def oracledb_type(self) -> Any:
        """Return the python-oracledb bind type used with `cursor.setinputsizes()`."""
        import oracledb  # only needed once rows are actually bound

        if self is DbType.BLOB:
            return oracledb.DB_TYPE_BLOB
        if self is DbType.VARCHAR2:
            return oracledb.DB_TYPE_VARCHAR
        if self is DbType.DATE:
            return oracledb.DB_TYPE_DATE
        if self is DbType.SINGLE:
            return oracledb.DB_TYPE_BINARY_FLOAT
        if self is DbType.DOUBLE:
            return oracledb.DB_TYPE_BINARY_DOUBLE
        # DECIMAL and all integer widths travel as NUMBER
        return oracledb.DB_TYPE_NUMBER


def infer_db_type(kind: ValueKind) -> DbType:
    """Map a value kind to the database parameter type.

    Arms are evaluated in order. UINT8 maps to INT16, not BYTE. Anything without an arm (booleans,
    times, nested types...) is sent as VARCHAR2.
    """
    match kind:
        case ValueKind.BINARY:
            return DbType.BLOB
        case ValueKind.TEXT:
            return DbType.VARCHAR2
        case ValueKind.DATETIME:
            return DbType.DATE
        case ValueKind.DECIMAL:
            return DbType.DECIMAL
        case ValueKind.INT32:
            return DbType.INT32
        case ValueKind.INT64:
            return DbType.INT64
        case ValueKind.INT16:
            return DbType.INT16
        case ValueKind.INT8:
            return DbType.BYTE
        case ValueKind.UINT8:
            return DbType.INT16
        case ValueKind.FLOAT32:
            return DbType.SINGLE
        case ValueKind.FLOAT64:
            return DbType.DOUBLE
        case _:
            return DbType.VARCHAR2


def kind_of_dtype(dtype: pl.DataType) -> ValueKind:
    """Classify a polars dtype. Object columns have no fixed kind and come back as OTHER."""
    if dtype == pl.Binary:
        return ValueKind.BINARY
    if dtype == pl.String:
        return ValueKind.TEXT
    if dtype == pl.Date or isinstance(dtype, pl.Datetime):
        return ValueKind.DATETIME
    if isinstance(dtype, pl.Decimal):
        return ValueKind.DECIMAL
    if dtype == pl.Int32:
        return ValueKind.INT32
    if dtype == pl.Int64:
        return ValueKind.INT64
    if dtype == pl.Int16:
        return ValueKind.INT16
    if dtype == pl.Int8:
        return ValueKind.INT8
    if dtype == pl.UInt8:
        return ValueKind.UINT8
    if dtype == pl.Float32:
        return ValueKind.FLOAT32
    if dtype == pl.Float64:
        return ValueKind.FLOAT64
    return ValueKind.OTHER


def kind_of_value(value: Any) -> ValueKind:
    """Classify a single python value, for columns whose dtype says nothing (polars Object)."""
    # bool is an int subclass; keep it out of the integer arm
    if isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.BINARY
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (dt.datetime, dt.date)):
        return ValueKind.DATETIME
    if isinstance(value, decimal.Decimal):
        return ValueKind.DECIMAL
    if isinstance(value, int):
        return ValueKind.INT64
    if isinstance(value, float):
        return ValueKind.FLOAT64
    return ValueKind.OTHER


def kind_of_series(s: pl.Series) -> ValueKind:
    if s.dtype != pl.Object:
        return kind_of_dtype(s.dtype)
    for value in s.to_list():
        if value is not None:
            return kind_of_value(value)
    return ValueKind.OTHER
