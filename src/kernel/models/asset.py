"""
Asset model. Assets hang directly off a project, outside the shot chain.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.kernel.models.base import Base, TimestampMixin


class AssetType(str, Enum):
    """Kinds of production assets."""
    CHARACTER = "character"
    PROP = "prop"
    ENVIRONMENT = "environment"
    FX = "fx"


class Asset(Base, TimestampMixin):
    """Reusable production asset belonging to a project."""
    
    __tablename__ = "assets"
    
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
    asset_type: Mapped[AssetType] = mapped_column(
        String(50),
        default=AssetType.PROP,
        nullable=False,
    )
    project_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    
    def __repr__(self) -> str:
        return f"<Asset {self.code}>"
