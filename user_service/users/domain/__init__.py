"""
Users Domain Layer
==================

Pure Python objects for the users module. No infrastructure dependencies.
"""

from user_service.users.domain.entities import NewUser, QueryResult, SeedOutcome

__all__ = [
    "NewUser",
    "QueryResult",
    "SeedOutcome",
]
