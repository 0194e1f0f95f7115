"""
Users Infrastructure Layer
==========================

Infrastructure implementations for the users module:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Bootstrap: startup admin seeding
"""

from user_service.users.infrastructure.models import UserModel
from user_service.users.infrastructure.repositories import SQLAlchemyUserRepository
from user_service.users.infrastructure.bootstrap import bootstrap_admin

__all__ = [
    "UserModel",
    "SQLAlchemyUserRepository",
    "bootstrap_admin",
]
