"""
Shared API
==========

Middleware and exception handlers registered on the FastAPI application.
"""

from user_service.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    global_exception_handler,
    repository_exception_handler,
)

__all__ = [
    "CorrelationIDMiddleware",
    "LoggingMiddleware",
    "global_exception_handler",
    "repository_exception_handler",
]
