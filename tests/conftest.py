"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules,
including an in-memory stand-in for the Supabase client so repositories and
routes can be exercised end to end without a database.
"""

import re
import threading
from collections import defaultdict
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from postgrest.exceptions import APIError

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, reset_container
from shared.config import Settings
from shared.models import AuthenticatedUser


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

_ILIKE_TERM = re.compile(r'(\w+)\.ilike\."((?:[^"\\]|\\.)*)"')
_EMBED = re.compile(r"(\w+):(\w+)\(([^)]*)\)")


def _unquote(value: str) -> str:
    """Undo PostgREST double-quote escaping."""
    return re.sub(r"\\(.)", r"\1", value)


def _like_to_regex(pattern: str) -> re.Pattern:
    """Translate a LIKE pattern (backslash escapes, % and _) to a regex."""
    # PostgREST turns * into % before the pattern reaches Postgres
    pattern = pattern.replace("*", "%")
    out = []
    chars = iter(pattern)
    for char in chars:
        if char == "\\":
            out.append(re.escape(next(chars, "\\")))
        elif char == "%":
            out.append(".*")
        elif char == "_":
            out.append(".")
        else:
            out.append(re.escape(char))
    return re.compile("^" + "".join(out) + "$", re.IGNORECASE | re.DOTALL)


def _parse_or(expression: str) -> Callable[[dict], bool]:
    """Support the `col.ilike."pattern",...` form used by BlogRepository."""
    terms = [
        (col, _like_to_regex(_unquote(pat))) for col, pat in _ILIKE_TERM.findall(expression)
    ]
    if not terms:
        raise ValueError(f"Unsupported or_ filter: {expression}")
    return lambda row: any(
        row.get(col) is not None and regex.match(str(row[col])) for col, regex in terms
    )


class FakeResponse:
    def __init__(self, data: list[dict], count: Optional[int] = None):
        self.data = data
        self.count = count


class FakeQuery:
    """Chainable query builder mirroring the PostgREST calls the repositories make."""

    def __init__(self, db: "FakeSupabaseClient", table: str):
        self._db = db
        self.table = table
        self.op = "select"
        self.payload: Optional[dict] = None
        self.count: Optional[str] = None
        self.columns: tuple[str, ...] = ("*",)
        self.filters: list[Callable[[dict], bool]] = []
        self.order_by: Optional[tuple[str, bool]] = None
        self.window: Optional[tuple[int, int]] = None
        self.max_rows: Optional[int] = None

    def select(self, *columns: str, count: Optional[str] = None) -> "FakeQuery":
        self.op = "select"
        self.columns = columns
        self.count = count
        return self

    def insert(self, data: dict) -> "FakeQuery":
        self.op = "insert"
        self.payload = data
        return self

    def update(self, data: dict) -> "FakeQuery":
        self.op = "update"
        self.payload = data
        return self

    def delete(self) -> "FakeQuery":
        self.op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def or_(self, filters: str) -> "FakeQuery":
        self.filters.append(_parse_or(filters))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.order_by = (column, desc)
        return self

    def range(self, start: int, end: int) -> "FakeQuery":
        self.window = (start, end)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.max_rows = size
        return self

    def execute(self) -> FakeResponse:
        return self._db.run(self)


class FakeSupabaseClient:
    """
    In-memory tables with the users.email unique constraint and
    `alias:table(cols)` embedding along `foreign_keys`.

    Set `fail_next` to an APIError to make the next query fail with it.
    """

    def __init__(self, unique: Optional[dict[str, list[str]]] = None):
        self.tables: dict[str, list[dict]] = defaultdict(list)
        self.unique = unique if unique is not None else {"users": ["email"]}
        # table -> {referenced table: foreign key column}
        self.foreign_keys = {"blogs": {"users": "owner"}}
        self.fail_next: Optional[APIError] = None
        self.queries: list[FakeQuery] = []
        self._lock = threading.Lock()

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def run(self, query: FakeQuery) -> FakeResponse:
        with self._lock:
            self.queries.append(query)
            if self.fail_next is not None:
                error, self.fail_next = self.fail_next, None
                raise error

            rows = self.tables[query.table]
            if query.op == "insert":
                return self._insert(query.table, rows, query.payload or {})

            matched = [row for row in rows if all(f(row) for f in query.filters)]

            if query.op == "update":
                for row in matched:
                    row.update(query.payload or {})
                return FakeResponse([dict(row) for row in matched])

            if query.op == "delete":
                doomed = {id(row) for row in matched}
                self.tables[query.table] = [row for row in rows if id(row) not in doomed]
                return FakeResponse([dict(row) for row in matched])

            return self._select(query, rows, matched)

    def _insert(self, table: str, rows: list[dict], payload: dict) -> FakeResponse:
        for column in self.unique.get(table, []):
            if any(row.get(column) == payload.get(column) for row in rows):
                raise APIError({
                    "code": "23505",
                    "message": f'duplicate key value violates unique constraint "{table}_{column}_key"',
                    "details": None,
                    "hint": None,
                })
        now = datetime.now(timezone.utc).isoformat()
        row = {"id": str(uuid4()), "created_at": now, "updated_at": now, **payload}
        rows.append(row)
        return FakeResponse([dict(row)])

    def _select(self, query: FakeQuery, rows: list[dict], matched: list[dict]) -> FakeResponse:
        total = len(matched)
        if query.order_by:
            column, desc = query.order_by
            position = {id(row): i for i, row in enumerate(rows)}
            matched = sorted(matched, key=lambda r: (r.get(column) or "", position[id(r)]), reverse=desc)
        if query.window:
            start, end = query.window
            matched = matched[start:end + 1]
        if query.max_rows is not None:
            matched = matched[:query.max_rows]
        count = total if query.count == "exact" else None
        return FakeResponse([self._embed(query, dict(row)) for row in matched], count=count)

    def _embed(self, query: FakeQuery, row: dict) -> dict:
        """Resolve `alias:table(col,...)` select entries through foreign keys."""
        for alias, table, columns in _EMBED.findall(",".join(query.columns)):
            fk = self.foreign_keys[query.table][table]
            target = next((r for r in self.tables[table] if r["id"] == row.get(fk)), None)
            wanted = [c.strip() for c in columns.split(",")]
            row[alias] = {c: target[c] for c in wanted} if target else None
        return row


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a fixed signing secret and a cheap bcrypt cost."""
    return Settings(
        _env_file=None,
        environment="test",
        jwt_secret=TEST_JWT_SECRET,
        bcrypt_rounds=4,
        blog_read_scope="all",
    )


@pytest.fixture
def fake_db() -> FakeSupabaseClient:
    """Fresh in-memory database."""
    return FakeSupabaseClient()


@pytest.fixture
def container(test_settings: Settings, fake_db: FakeSupabaseClient) -> ServiceContainer:
    """Service container wired to the in-memory database."""
    return ServiceContainer(settings=test_settings, db=fake_db)


@pytest.fixture
def app(container: ServiceContainer):
    """Create a fresh app for each test, using the test container."""
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "11111111-1111-4111-8111-111111111111"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def make_token(container: ServiceContainer) -> Callable[..., str]:
    """Factory for tokens signed by the test container's token service."""

    def _make(user_id: str = "11111111-1111-4111-8111-111111111111", email: str = "test@example.com", **kwargs) -> str:
        return container.token_service.issue(AuthenticatedUser(id=user_id, email=email), **kwargs)

    return _make


@pytest.fixture
def auth_headers(make_token, test_user_id: str, test_user_email: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {make_token(test_user_id, test_user_email)}"}
