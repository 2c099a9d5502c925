"""
Ownership chain below a project: Episode -> Sequence -> Shot.

Each node carries a single nullable foreign key to its parent.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.kernel.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.kernel.models.project import Project


class Episode(Base, TimestampMixin):
    """Episode within a project."""
    
    __tablename__ = "episodes"
    
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
    ep_number: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    project_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    
    # Relationships
    project: Mapped[Optional["Project"]] = relationship(
        "Project",
        back_populates="episodes",
    )
    sequences: Mapped[List["Sequence"]] = relationship(
        "Sequence",
        back_populates="episode",
    )
    
    def __repr__(self) -> str:
        return f"<Episode {self.code}>"


class Sequence(Base, TimestampMixin):
    """Sequence within an episode."""
    
    __tablename__ = "sequences"
    
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
    cut_order: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    episode_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("episodes.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    
    # Relationships
    episode: Mapped[Optional["Episode"]] = relationship(
        "Episode",
        back_populates="sequences",
    )
    shots: Mapped[List["Shot"]] = relationship(
        "Shot",
        back_populates="sequence",
    )
    
    def __repr__(self) -> str:
        return f"<Sequence {self.code}>"


class Shot(Base, TimestampMixin):
    """Individual shot within a sequence."""
    
    __tablename__ = "shots"
    
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
    sequence_number: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    sequence_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("sequences.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    
    # Relationships
    sequence: Mapped[Optional["Sequence"]] = relationship(
        "Sequence",
        back_populates="shots",
    )
    
    def __repr__(self) -> str:
        return f"<Shot {self.code}>"
