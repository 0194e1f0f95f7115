"""
Users Interfaces Layer
======================

Interface adapters (controllers) for the users module.

This is the outermost layer - handles HTTP requests/responses and
delegates to application services.
"""

from user_service.users.interfaces.controllers import (
    router as users_router,
    get_user_repository,
    get_user_service,
)

__all__ = ["users_router", "get_user_repository", "get_user_service"]
