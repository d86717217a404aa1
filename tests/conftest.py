import datetime as dt
import decimal

import polars as pl
import pytest


class DriverError(Exception):
    """Stands in for oracledb.DatabaseError."""


class RecordingCursor:
    def __init__(self, owner: 'RecordingDBAPIConnection'):
        self._owner = owner
        self.input_sizes = None
        self.rowcount = -1
        self.closed = False

    def setinputsizes(self, *sizes):
        self.input_sizes = sizes

    def executemany(self, sql, rows):
        self._owner.calls += 1
        if self._owner.fail_on_call == self._owner.calls:
            raise DriverError('ORA-00942: table or view does not exist')
        self._owner.executed.append((sql, list(rows)))
        self.rowcount = len(rows)

    def close(self):
        self.closed = True


class RecordingDBAPIConnection:
    def __init__(self, fail_on_call: int | None = None):
        self.fail_on_call = fail_on_call
        self.calls = 0
        self.executed: list[tuple[str, list[tuple]]] = []
        self.cursors: list[RecordingCursor] = []

    def cursor(self):
        cur = RecordingCursor(self)
        self.cursors.append(cur)
        return cur


class FakeConnection:
    """The slice of sqlalchemy.Connection that orabulk touches."""

    def __init__(self, raw: RecordingDBAPIConnection | None = None):
        self.connection = raw or RecordingDBAPIConnection()
        self.closed = False
        self.close_count = 0
        self.transaction = None
        self.begin_count = 0

    def in_transaction(self):
        return self.transaction is not None

    def begin(self):
        self.begin_count += 1
        return FakeTransaction(self)

    def close(self):
        self.close_count += 1
        self.closed = True


class FakeTransaction:
    def __init__(self, connection):
        self.connection = connection
        connection.transaction = self


class FakeEngine:
    def __init__(self, url, **options):
        self.url = url
        self.options = options
        self.connections: list[FakeConnection] = []
        self.dispose_count = 0

    def connect(self):
        conn = FakeConnection()
        self.connections.append(conn)
        return conn

    def dispose(self):
        self.dispose_count += 1


@pytest.fixture()
def raw_conn():
    return RecordingDBAPIConnection()


@pytest.fixture()
def fake_conn(raw_conn):
    return FakeConnection(raw_conn)


@pytest.fixture()
def fake_engines(monkeypatch):
    """Patch sqlalchemy.create_engine; returns the list of engines created."""
    import sqlalchemy as sa

    engines: list[FakeEngine] = []

    def _create_engine(url, **options):
        eng = FakeEngine(url, **options)
        engines.append(eng)
        return eng

    monkeypatch.setattr(sa, 'create_engine', _create_engine)
    return engines


@pytest.fixture()
def heroes_df():
    return pl.DataFrame({
        'name': ['Väinämöinen', 'Joukahainen', 'Ilmarinen', 'Lemminkäinen', 'Louhi'],
        'power': [100, 50, 80, 70, 95],
    })


@pytest.fixture()
def mixed_df():
    return pl.DataFrame({
        'blob': pl.Series([b'\x00\x01', b'\xff'], dtype=pl.Binary),
        'txt': pl.Series(['a', 'b'], dtype=pl.String),
        'day': pl.Series([dt.datetime(2024, 1, 1), dt.datetime(2024, 1, 2)], dtype=pl.Datetime),
        'amount': pl.Series([decimal.Decimal('1.50'), decimal.Decimal('2.25')], dtype=pl.Decimal(10, 2)),
        'i32': pl.Series([1, 2], dtype=pl.Int32),
        'i64': pl.Series([1, 2], dtype=pl.Int64),
        'i16': pl.Series([1, 2], dtype=pl.Int16),
        'i8': pl.Series([-1, 2], dtype=pl.Int8),
        'u8': pl.Series([200, 255], dtype=pl.UInt8),
        'f32': pl.Series([1.5, 2.5], dtype=pl.Float32),
        'f64': pl.Series([1.5, 2.5], dtype=pl.Float64),
        'flag': pl.Series([True, False], dtype=pl.Boolean),
    })
