"""Tests for the schema bootstrap."""

import pytest

from db_chirpy import schema


class FakeCursor:
    def __init__(self, executed, fail=False):
        self.executed = executed
        self.fail = fail

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query):
        if self.fail:
            raise RuntimeError("syntax error")
        self.executed.append(query)


class FakeConnection:
    def __init__(self, fail=False):
        self.executed = []
        self.autocommit = False
        self.closed = False
        self.fail = fail

    def cursor(self):
        return FakeCursor(self.executed, self.fail)

    def close(self):
        self.closed = True


def test_creates_tables(monkeypatch) -> None:
    conn = FakeConnection()
    dsns = []

    def connect(dsn):
        dsns.append(dsn)
        return conn

    monkeypatch.setattr(schema.psycopg2, "connect", connect)
    schema.create_schema("postgres://localhost/chirpy")

    assert dsns == ["postgres://localhost/chirpy"]
    assert conn.autocommit
    assert conn.closed
    assert "CREATE TABLE IF NOT EXISTS users" in conn.executed[0]
    assert "CREATE TABLE IF NOT EXISTS chirps" in conn.executed[1]
    assert "ON DELETE CASCADE" in conn.executed[1]


def test_closes_connection_on_error(monkeypatch) -> None:
    conn = FakeConnection(fail=True)
    monkeypatch.setattr(schema.psycopg2, "connect", lambda dsn: conn)

    with pytest.raises(RuntimeError):
        schema.create_schema("postgres://localhost/chirpy")
    assert conn.closed
