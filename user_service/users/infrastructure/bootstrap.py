"""
Startup bootstrap for the users module.

Runs the admin seeder once against the shared database. Failures are logged
and reported as ``SeedOutcome.FAILED``; they never stop the service.
"""

from user_service.infrastructure.database import Database
from user_service.shared.infrastructure.logging import get_logger
from user_service.users.application import AdminSeeder
from user_service.users.domain import SeedOutcome
from user_service.users.infrastructure.repositories import SQLAlchemyUserRepository

logger = get_logger(__name__)


async def bootstrap_admin(database: Database, seeder: AdminSeeder) -> SeedOutcome:
    """
    Seed the admin account in its own transaction.

    Returns:
        SeedOutcome: created, already_seeded, or failed
    """
    try:
        async with database.session() as session:
            outcome = await seeder.seed(SQLAlchemyUserRepository(session))
    except Exception as e:
        logger.error("Error seeding admin user", extra={"error": str(e)})
        return SeedOutcome.FAILED

    return outcome
