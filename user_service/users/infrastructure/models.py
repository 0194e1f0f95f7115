"""
Users Infrastructure Models
===========================

SQLAlchemy ORM model for the ``users`` table.

The table normally already exists; ``Database.create_tables`` only creates
it for local development.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from user_service.config import UserRole
from user_service.infrastructure.database import Base


class UserModel(Base):
    """
    Database model for a user row.

    Maps to the 'users' table.
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default=UserRole.USER)
