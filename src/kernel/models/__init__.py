"""
Kernel Data Models

SQLAlchemy models for production tracking: users, projects with their
per-project permissions, the Episode -> Sequence -> Shot chain, assets and
versions.
"""

from src.kernel.models.base import Base, TimestampMixin
from src.kernel.models.user import User, UserRole
from src.kernel.models.project import Project, ProjectPermission, ProjectRole
from src.kernel.models.hierarchy import Episode, Sequence, Shot
from src.kernel.models.asset import Asset, AssetType
from src.kernel.models.version import Version

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    # User
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
    # Assets & versions
    "Asset",
    "AssetType",
    "Version",
]
