"""
Core Module
============

Shared core utilities and abstractions used across the application.

This module contains framework-agnostic code: the exception hierarchy and
password hashing.
"""

from user_service.core.exceptions import (
    ApplicationException,
    RepositoryException,
    ConfigurationException,
)
from user_service.core.security import hash_password, verify_password

__all__ = [
    "ApplicationException",
    "RepositoryException",
    "ConfigurationException",
    "hash_password",
    "verify_password",
]
