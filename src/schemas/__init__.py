"""
Pydantic schemas for API request/response validation.
"""

from src.schemas.common import ErrorResponse, HealthResponse
from src.schemas.access import (
    AccessibleProjectsResponse,
    EntityAccessResponse,
    PermissionCheckResponse,
    ProjectRoleResponse,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Access
    "AccessibleProjectsResponse",
    "EntityAccessResponse",
    "PermissionCheckResponse",
    "ProjectRoleResponse",
]
