"""
Core Exceptions
================

Custom exceptions for the application.

These exceptions define service-specific errors that are caught and handled
at the application boundaries (startup bootstrap and HTTP exception handlers).
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""
