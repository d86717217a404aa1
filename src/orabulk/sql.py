from __future__ import annotations

from typing import Sequence


def column_list(columns: Sequence[str]) -> str:
    return ','.join(columns)


def bind_list(n: int) -> str:
    """Positional binds `:1, :2, ...`; bind i belongs to column i."""
    return ', '.join(f':{i + 1}' for i in range(n))


def build_insert_sql(table_name: str, columns: Sequence[str]) -> str:
    """Build the array-bind INSERT shared by every batch of one upload.

    Table and column names are pasted in verbatim: no quoting, no escaping. Callers must only pass
    trusted identifiers (quote them yourself, e.g. '"SCHEMA"."T"', if case or reserved words matter).

    Example:
        >>> build_insert_sql('T', ['A', 'B', 'C'])
        'Insert Into T ( A,B,C ) Values ( :1, :2, :3 )'
    """
    if not table_name:
        raise ValueError('table_name must be a non-empty string')
    if not columns:
        raise ValueError('cannot build an INSERT without columns')
    return f'Insert Into {table_name} ( {column_list(columns)} ) Values ( {bind_list(len(columns))} )'
