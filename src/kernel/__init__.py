"""
Kernel Layer

Foundational components every request handler depends on:
- Data models (projects, ownership chain, assets, versions, permissions)
- Identity (per-request user context, bearer token verification)
- Permission Core (ownership chain resolution and project role checks)

Invariants:
- The permission core only reads; it never mutates ownership or permissions
- Unresolvable entities are refused, never implicitly accessible
"""

from src.kernel.models import (
    User,
    UserRole,
    Project,
    ProjectPermission,
    ProjectRole,
    Episode,
    Sequence,
    Shot,
    Asset,
    Version,
)

__all__ = [
    # User & Identity
    "User",
    "UserRole",
    # Project
    "Project",
    "ProjectPermission",
    "ProjectRole",
    # Ownership chain
    "Episode",
    "Sequence",
    "Shot",
    "Asset",
    "Version",
]
