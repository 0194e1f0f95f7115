"""
Users Application Services
==========================

Application services orchestrate the user lookup and admin seeding logic
on top of an abstract repository.

Following Dependency Inversion: services depend on ``IUserRepository``,
never on SQLAlchemy directly.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from user_service.config import UserRole
from user_service.core import hash_password
from user_service.shared.infrastructure.logging import get_logger
from user_service.users.domain import NewUser, QueryResult, SeedOutcome

logger = get_logger(__name__)


# ========== Repository Interface (Dependency Inversion) ==========

class IUserRepository(ABC):
    """Interface for user data access."""

    @abstractmethod
    async def get_user(self, identifier: str) -> QueryResult:
        """Return every row whose id equals ``identifier``."""

    @abstractmethod
    async def find_by_role(self, role: str) -> List[Dict[str, Any]]:
        """Return rows having the given role."""

    @abstractmethod
    async def create(self, user: NewUser) -> Dict[str, Any]:
        """Insert a user and return the stored row."""

    @abstractmethod
    async def acquire_seed_lock(self) -> None:
        """Serialize seeding runs for the rest of the current transaction."""


# ========== Application Services ==========

class UserService:
    """Read access to user records."""

    def __init__(self, user_repository: IUserRepository):
        self._user_repo = user_repository

    async def get_user(self, identifier: str) -> QueryResult:
        """
        Look up a user by identifier.

        The identifier is passed to the database untouched; malformed values
        surface as the database's own error (``RepositoryException``).

        Returns:
            QueryResult: matching rows (normally zero or one) and command tag
        """
        result = await self._user_repo.get_user(identifier)
        logger.debug(
            "User lookup finished",
            extra={"identifier": identifier, "row_count": result.row_count}
        )
        return result


class AdminSeeder:
    """
    Ensures one administrative account exists.

    Check-then-insert, run inside the caller's transaction after taking the
    repository's seed lock.
    """

    def __init__(self, name: str, email: str, password: str):
        self._name = name
        self._email = email
        self._password = password

    @classmethod
    def from_settings(cls, settings) -> "AdminSeeder":
        return cls(settings.admin_name, settings.admin_email, settings.admin_password)

    async def seed(self, user_repository: IUserRepository) -> SeedOutcome:
        """
        Insert the admin row unless one already exists.

        Errors propagate; the startup bootstrap decides what to do with them.
        """
        await user_repository.acquire_seed_lock()

        admins = await user_repository.find_by_role(UserRole.ADMIN)
        if admins:
            logger.info("Admin user already seeded", extra={"admin_count": len(admins)})
            return SeedOutcome.ALREADY_SEEDED

        await user_repository.create(
            NewUser(
                name=self._name,
                email=self._email,
                password_hash=hash_password(self._password),
                role=UserRole.ADMIN,
            )
        )
        logger.info("Admin user created", extra={"email": self._email})
        return SeedOutcome.CREATED
