from orabulk.bulk_copy import OracleBulkCopy, Ownership
from orabulk.columns import ColumnDescriptor, ParameterBinding, describe_columns, project_batch, project_column
from orabulk.db.insert.bulk_oracledb import ArrayBindCommand, bulk_insert_oracledb_executemany
from orabulk.exceptions import (
    ArgumentError,
    BindCountError,
    BulkCopyError,
    ConfigurationError,
    ConsistencyError,
)
from orabulk.planner import BatchPlan, plan_batches
from orabulk.sql import build_insert_sql
from orabulk.types import DbType, ValueKind, infer_db_type, kind_of_dtype, kind_of_value

__all__ = [
    'OracleBulkCopy',
    'Ownership',
    'ColumnDescriptor',
    'ParameterBinding',
    'describe_columns',
    'project_batch',
    'project_column',
    'ArrayBindCommand',
    'bulk_insert_oracledb_executemany',
    'ArgumentError',
    'BindCountError',
    'BulkCopyError',
    'ConfigurationError',
    'ConsistencyError',
    'BatchPlan',
    'plan_batches',
    'build_insert_sql',
    'DbType',
    'ValueKind',
    'infer_db_type',
    'kind_of_dtype',
    'kind_of_value',
]
