"""
Version model.

A version points at its owner polymorphically through (entity_type, entity_id)
rather than through a foreign key, so the owner can be an asset, sequence,
episode or project.
"""

from typing import Optional

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.kernel.models.base import Base, TimestampMixin


class Version(Base, TimestampMixin):
    """A published iteration of some production entity."""
    
    __tablename__ = "versions"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    code: Mapped[str] = mapped_column(
        String(100),
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
    latest: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
    )
    
    # Polymorphic owner; the type label is free text in storage
    entity_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    entity_type: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    
    __table_args__ = (
        Index("ix_versions_entity", "entity_id", "entity_type"),
    )
    
    def __repr__(self) -> str:
        return f"<Version {self.code} {self.entity_type}:{self.entity_id}>"
