"""
Users Infrastructure Repositories
=================================

SQLAlchemy implementation of the user repository.

Lookups by identifier go through a raw parameterized statement so rows come
back with every column the table has, unchanged.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.core import RepositoryException
from user_service.users.application import IUserRepository
from user_service.users.domain import NewUser, QueryResult
from user_service.users.infrastructure.models import UserModel

# The identifier is bound as text and cast server side, so a malformed value
# fails with PostgreSQL's own "invalid input syntax" error.
GET_USER_SQL = text("SELECT * FROM users WHERE id = CAST(CAST(:id AS TEXT) AS BIGINT)")

# Arbitrary application-wide key for pg_advisory_xact_lock
SEED_LOCK_KEY = 7301944117


def _command_tag(statement) -> str:
    return str(statement).split(None, 1)[0].upper()


def _driver_message(exc: BaseException) -> str:
    """Unwrap SQLAlchemy/DBAPI wrappers down to the driver's own message."""
    orig = getattr(exc, "orig", None) or exc
    cause = orig.__cause__ or orig
    return str(cause)


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (SQLAlchemyError, OSError) as e:
        raise RepositoryException(
            _driver_message(e),
            details={"operation": operation, "error_type": type(e).__name__}
        ) from e


class SQLAlchemyUserRepository(IUserRepository):
    """
    SQLAlchemy implementation of the user repository.

    Works inside the caller's session; never commits.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_user(self, identifier: str) -> QueryResult:
        """Get every row whose id equals ``identifier``."""
        with _translate_errors("get_user"):
            result = await self._session.execute(GET_USER_SQL, {"id": identifier})
            rows = [dict(row) for row in result.mappings().all()]

        return QueryResult(command=_command_tag(GET_USER_SQL), rows=rows)

    async def find_by_role(self, role: str) -> List[Dict[str, Any]]:
        """Get rows having the given role."""
        users = UserModel.__table__
        stmt = select(users).where(users.c.role == role).order_by(users.c.id)

        with _translate_errors("find_by_role"):
            result = await self._session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]

    async def create(self, user: NewUser) -> Dict[str, Any]:
        """Insert a new user and return the stored columns."""
        model = UserModel(
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role,
        )

        with _translate_errors("create"):
            self._session.add(model)
            await self._session.flush()

        return {
            column.key: getattr(model, column.key)
            for column in UserModel.__table__.columns
        }

    async def acquire_seed_lock(self) -> None:
        """
        Take a transaction-scoped advisory lock on PostgreSQL.

        Released automatically at commit or rollback. Other dialects have no
        advisory locks and are left unlocked.
        """
        if self._session.bind is None or self._session.bind.dialect.name != "postgresql":
            return

        with _translate_errors("acquire_seed_lock"):
            await self._session.execute(
                text("SELECT pg_advisory_xact_lock(:key)"), {"key": SEED_LOCK_KEY}
            )
