from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import polars as pl

from orabulk.types import DbType, ValueKind, infer_db_type, kind_of_series


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    kind: ValueKind
    db_type: DbType


@dataclass(frozen=True)
class ParameterBinding:
    """One column's values for one batch, column-major."""
    db_type: DbType
    values: Sequence[Any]

    def __len__(self) -> int:
        return len(self.values)


def describe_columns(df: pl.DataFrame) -> list[ColumnDescriptor]:
    """Derive one descriptor per column, in frame order. Done once per upload and reused by every batch."""
    out: list[ColumnDescriptor] = []
    for s in df.get_columns():
        kind = kind_of_series(s)
        out.append(ColumnDescriptor(name=s.name, kind=kind, db_type=infer_db_type(kind)))
    return out


def project_column(df: pl.DataFrame, descriptor: ColumnDescriptor, offset: int, count: int) -> ParameterBinding:
    """Extract rows `[offset, offset + count)` of one column as python values, in row order.

    Values are passed through as polars hands them back; no coercion toward the inferred type.
    """
    if offset < 0 or count < 0:
        raise ValueError('offset and count must be non-negative')
    if offset + count > df.height:
        raise ValueError(f'row range [{offset}, {offset + count}) exceeds table height {df.height}')
    values = df.get_column(descriptor.name).slice(offset, count).to_list()
    return ParameterBinding(db_type=descriptor.db_type, values=values)


def project_batch(
        df: pl.DataFrame,
        descriptors: list[ColumnDescriptor],
        offset: int,
        count: int,
) -> list[ParameterBinding]:
    return [project_column(df, d, offset, count) for d in descriptors]
