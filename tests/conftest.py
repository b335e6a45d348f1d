"""Shared fixtures: an in-memory stand-in for the Supabase async client."""
import itertools
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from reading_tracker.api.app import app
from reading_tracker.auth.dependencies import get_supabase_client
from reading_tracker.config import config

TOKENS = {
    "token-alice": "user-alice",
    "token-bob": "user-bob",
}

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_gotrue_user(user_id: str) -> SimpleNamespace:
    return SimpleNamespace(
        id=user_id,
        aud="authenticated",
        role="authenticated",
        email=f"{user_id.removeprefix('user-')}@example.com",
        phone="",
        app_metadata={"provider": "email"},
        user_metadata={},
        created_at=EPOCH,
        last_sign_in_at=EPOCH,
    )


class FakeQuery:
    """Chainable query mimicking the postgrest request builders."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self.operation = None
        self.payload = None
        self.filters: list[tuple[str, str]] = []
        self.ordering = None

    def select(self, *columns):
        self.operation = "select"
        return self

    def insert(self, row):
        self.operation = "insert"
        self.payload = row
        return self

    def update(self, values):
        self.operation = "update"
        self.payload = values
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def _matches(self, row: dict) -> bool:
        return all(str(row.get(column)) == str(value) for column, value in self.filters)

    async def execute(self):
        self.db.executed.append((self.operation, self.table_name, list(self.filters)))
        if self.db.error is not None:
            raise self.db.error

        rows = self.db.tables.setdefault(self.table_name, [])

        if self.operation == "insert":
            row = dict(self.payload)
            row["id"] = str(next(self.db.ids))
            row["created_at"] = (EPOCH + timedelta(seconds=next(self.db.clock))).isoformat()
            rows.append(row)
            return SimpleNamespace(data=[dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self.operation == "update":
            for row in matched:
                row.update(self.payload)
        elif self.operation == "delete":
            self.db.tables[self.table_name] = [row for row in rows if not self._matches(row)]
        elif self.ordering is not None:
            column, desc = self.ordering
            matched = sorted(matched, key=lambda row: row[column], reverse=desc)

        return SimpleNamespace(data=[dict(row) for row in matched])


class FakeSupabase:
    """Supabase client double: in-memory tables plus token-based auth."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self.executed: list[tuple] = []
        self.error: Exception | None = None
        self.ids = itertools.count(1)
        self.clock = itertools.count(1)
        self.auth = AsyncMock()
        self.auth.get_user.side_effect = self._get_user

    @staticmethod
    def _get_user(token):
        user_id = TOKENS.get(token)
        if user_id is None:
            raise Exception("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=make_gotrue_user(user_id))

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rows(self, table: str = "books") -> list[dict]:
        return self.tables.get(table, [])


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Pin settings that tests rely on regardless of the local .env"""
    monkeypatch.setattr(config, "STRICT_NOT_FOUND", False)
    monkeypatch.setattr(config, "BOOKS_TABLE", "books")


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def api_client(fake_supabase):
    """TestClient with the Supabase dependency replaced by the in-memory fake"""
    app.dependency_overrides[get_supabase_client] = lambda: fake_supabase
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def alice_headers():
    return {"Authorization": "Bearer token-alice"}


@pytest.fixture
def bob_headers():
    return {"Authorization": "Bearer token-bob"}


@pytest.fixture
def gotrue_user():
    """Factory for gotrue-style user objects"""
    return make_gotrue_user
