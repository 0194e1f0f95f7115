"""
Users Application DTOs
======================

Pydantic response models for the HTTP layer.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class GreetingResponse(BaseModel):
    message: str = Field(default="Hello World!")


class SetupResponse(BaseModel):
    """Rows of a user lookup plus the statement's command tag."""
    message: str = Field(..., description="Human readable status")
    data: List[Dict[str, Any]] = Field(default_factory=list, description="Matching rows")
    command: str = Field(..., description="Command tag, e.g. SELECT")


class ErrorResponse(BaseModel):
    error: str
    details: str


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    checks: Dict[str, str]
