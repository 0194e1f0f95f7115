"""
Users Domain Entities
=====================

Value objects exchanged between the repository, the services and the
HTTP layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from user_service.config import UserRole


@dataclass(frozen=True)
class NewUser:
    """A user row to be inserted. ``password_hash`` is never plaintext."""
    name: str
    email: str
    password_hash: str
    role: str = UserRole.USER


@dataclass
class QueryResult:
    """
    Rows returned by a statement together with its command tag.

    Rows are plain column -> value mappings exactly as the database returned
    them.
    """
    command: str
    rows: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def first(self) -> Optional[Dict[str, Any]]:
        return self.rows[0] if self.rows else None


class SeedOutcome(str, Enum):
    """Result of one admin seeding run."""
    CREATED = "created"
    ALREADY_SEEDED = "already_seeded"
    FAILED = "failed"
