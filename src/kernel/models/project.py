"""
Project and per-project permission models.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.kernel.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.kernel.models.hierarchy import Episode


class ProjectRole(str, Enum):
    """
    Role a user holds within a single project.

    Comparisons must go through src.kernel.permissions.roles; the order in
    which members are declared here carries no meaning.
    """
    OWNER = "owner"  # Full control, manages permissions
    CONTRIBUTOR = "contributor"  # Create/edit content
    VIEWER = "viewer"  # Read-only


class Project(Base, TimestampMixin):
    """Top-level production container."""
    
    __tablename__ = "projects"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    code: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    
    # Relationships
    episodes: Mapped[List["Episode"]] = relationship(
        "Episode",
        back_populates="project",
    )
    permissions: Mapped[List["ProjectPermission"]] = relationship(
        "ProjectPermission",
        back_populates="project",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Project {self.code}>"


class ProjectPermission(Base):
    """
    Links a user to a project with a role.

    Admin users bypass these records; everyone else needs one to see the
    project or anything beneath it (episodes, sequences, shots, assets,
    versions).
    """
    
    __tablename__ = "project_permissions"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[ProjectRole] = mapped_column(
        String(20),
        default=ProjectRole.VIEWER,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    
    # Relationships
    project: Mapped["Project"] = relationship(
        "Project",
        back_populates="permissions",
    )
    
    __table_args__ = (
        # One permission per user per project
        UniqueConstraint("user_id", "project_id", name="uq_project_permissions_user_project"),
        Index("ix_project_permissions_project_role", "project_id", "role"),
    )
    
    def __repr__(self) -> str:
        return f"<ProjectPermission project={self.project_id} user={self.user_id} role={self.role}>"
