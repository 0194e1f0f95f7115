"""
Users Application Layer
=======================

Contains:
- Services: user lookup and admin seeding
- DTOs: response models for the HTTP layer

This layer depends on the domain layer and the repository interface,
but not on concrete infrastructure implementations.
"""

from user_service.users.application.dto import (
    GreetingResponse,
    SetupResponse,
    ErrorResponse,
    HealthResponse,
)
from user_service.users.application.services import (
    UserService,
    AdminSeeder,
    IUserRepository,
)

__all__ = [
    # DTOs
    "GreetingResponse",
    "SetupResponse",
    "ErrorResponse",
    "HealthResponse",
    # Services
    "UserService",
    "AdminSeeder",
    # Repository Interfaces
    "IUserRepository",
]
