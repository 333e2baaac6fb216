from __future__ import annotations

import os
from datetime import datetime, timezone
from uuid import uuid4

# Settings are read at import time; seed them before the app is imported.
os.environ["ENV"] = "test"
os.environ.setdefault("TOKEN_SECRET", "test-token-secret")
os.environ.setdefault("BCRYPT_PASSWORD", "test-pepper")
os.environ["SALT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from storefront.auth import hash_password
from storefront.database import get_db
from storefront.main import app
from storefront.models import User


class _QueryStub:
    """Evaluates ``column == value`` criteria against in-memory rows."""

    def __init__(self, rows):
        self._rows = list(rows)

    def filter(self, *criteria):
        rows = self._rows
        for criterion in criteria:
            key = criterion.left.key
            value = criterion.right.value
            rows = [row for row in rows if getattr(row, key) == value]
        return _QueryStub(rows)

    def order_by(self, column):
        return _QueryStub(sorted(self._rows, key=lambda row: getattr(row, column.key)))

    def first(self):
        return self._rows[0] if self._rows else None

    def all(self):
        return list(self._rows)


class SessionStub:
    def __init__(self, users=(), commit_error=None, execute_error=None):
        self.users = list(users)
        self.added = []
        self.committed = False
        self.rolled_back = False
        self.commit_error = commit_error
        self.execute_error = execute_error
        self.executed = []

    def query(self, _model):
        return _QueryStub(self.users)

    def add(self, obj):
        self.added.append(obj)

    def commit(self):
        if self.commit_error is not None:
            raise self.commit_error
        self.users.extend(self.added)
        self.added = []
        self.committed = True

    def rollback(self):
        self.added = []
        self.rolled_back = True

    def refresh(self, obj):
        if obj.id is None:
            obj.id = uuid4()
        if obj.created_at is None:
            obj.created_at = datetime.now(timezone.utc)

    def execute(self, statement):
        if self.execute_error is not None:
            raise self.execute_error
        self.executed.append(str(statement))


@pytest.fixture
def make_user():
    def _make(username: str = "ada", password: str = "correct horse battery", **fields) -> User:
        return User(
            id=uuid4(),
            username=username,
            first_name=fields.get("first_name", "Ada"),
            last_name=fields.get("last_name", "Lovelace"),
            password_digest=hash_password(password),
            created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        )

    return _make


@pytest.fixture
def db_session() -> SessionStub:
    return SessionStub()


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
