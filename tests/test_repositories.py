"""
SQLAlchemyUserRepository tests against a stub session.

Statement construction, ORM inserts and error translation are covered
here; no database is needed.
"""

import asyncio
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import DBAPIError

from user_service.core import RepositoryException
from user_service.config import UserRole
from user_service.users.domain import NewUser
from user_service.users.infrastructure import SQLAlchemyUserRepository, UserModel
from user_service.users.infrastructure.repositories import GET_USER_SQL, SEED_LOCK_KEY


class StubResult:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return SimpleNamespace(all=lambda: self._rows)


class StubSession:
    def __init__(self, rows=None, error=None, dialect="postgresql"):
        self.rows = rows or []
        self.error = error
        self.bind = SimpleNamespace(dialect=SimpleNamespace(name=dialect))
        self.executed = []
        self.added = []
        self.flushes = 0

    async def execute(self, statement, params=None):
        self.executed.append((statement, params))
        if self.error:
            raise self.error
        return StubResult(self.rows)

    def add(self, instance):
        self.added.append(instance)

    async def flush(self):
        self.flushes += 1


def test_get_user_binds_identifier_as_parameter():
    session = StubSession(rows=[{"id": 1, "name": "Admin"}])

    result = asyncio.run(SQLAlchemyUserRepository(session).get_user("1"))

    statement, params = session.executed[0]
    assert statement is GET_USER_SQL
    assert params == {"id": "1"}
    assert result.command == "SELECT"
    assert result.rows == [{"id": 1, "name": "Admin"}]


def test_get_user_without_match_returns_no_rows():
    result = asyncio.run(SQLAlchemyUserRepository(StubSession()).get_user("999"))

    assert result.rows == []
    assert result.first is None
    assert result.row_count == 0


def test_get_user_surfaces_driver_message():
    error = DBAPIError("SELECT", {}, Exception('invalid input syntax for type integer: "abc"'))
    session = StubSession(error=error)

    with pytest.raises(RepositoryException) as exc_info:
        asyncio.run(SQLAlchemyUserRepository(session).get_user("abc"))

    assert exc_info.value.message == 'invalid input syntax for type integer: "abc"'
    assert exc_info.value.details["operation"] == "get_user"


def test_seed_lock_uses_advisory_lock_on_postgres():
    session = StubSession()

    asyncio.run(SQLAlchemyUserRepository(session).acquire_seed_lock())

    statement, params = session.executed[0]
    assert "pg_advisory_xact_lock" in str(statement)
    assert params == {"key": SEED_LOCK_KEY}


def test_seed_lock_is_noop_on_other_dialects():
    session = StubSession(dialect="sqlite")

    asyncio.run(SQLAlchemyUserRepository(session).acquire_seed_lock())

    assert session.executed == []


def test_get_user_casts_identifier_to_bigint():
    # BIGSERIAL keys above 2**31 must stay readable
    assert str(GET_USER_SQL) == "SELECT * FROM users WHERE id = CAST(CAST(:id AS TEXT) AS BIGINT)"


def test_find_by_role_filters_on_role_column():
    admin = {"id": 1, "name": "Admin", "email": "admin123@gmail.com", "password_hash": "x", "role": "admin"}
    session = StubSession(rows=[admin])

    rows = asyncio.run(SQLAlchemyUserRepository(session).find_by_role(UserRole.ADMIN))

    statement, _ = session.executed[0]
    compiled = statement.compile()
    assert "FROM users" in str(compiled)
    assert "WHERE users.role = :role_1" in str(compiled)
    assert compiled.params == {"role_1": "admin"}
    assert rows == [admin]


def test_create_adds_model_and_flushes():
    session = StubSession()
    new_user = NewUser(
        name="Admin",
        email="admin123@gmail.com",
        password_hash="$2b$12$hash",
        role=UserRole.ADMIN,
    )

    row = asyncio.run(SQLAlchemyUserRepository(session).create(new_user))

    assert session.flushes == 1
    [model] = session.added
    assert isinstance(model, UserModel)
    assert model.password_hash == "$2b$12$hash"
    assert model.role == "admin"
    assert row["email"] == "admin123@gmail.com"
    assert row["role"] == "admin"
    assert set(row) == {"id", "name", "email", "password_hash", "role"}
