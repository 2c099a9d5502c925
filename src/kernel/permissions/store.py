"""
Read-only lookups the permission core depends on.

AccessStore is the seam between the core and storage. SqlAccessStore is the
SQLAlchemy implementation used by the application; tests substitute their own.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Set

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from src.kernel.models.asset import Asset
from src.kernel.models.hierarchy import Episode, Sequence, Shot
from src.kernel.models.project import Project, ProjectPermission, ProjectRole
from src.kernel.models.version import Version
from src.kernel.types import EntityId
from src.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PermissionRecord:
    """A user's role on one project."""

    project_id: EntityId
    role: ProjectRole


@dataclass(frozen=True)
class EpisodeLink:
    id: EntityId
    project_id: Optional[EntityId]


@dataclass(frozen=True)
class SequenceLink:
    id: EntityId
    episode_id: Optional[EntityId]


@dataclass(frozen=True)
class ShotLink:
    id: EntityId
    sequence_id: Optional[EntityId]


@dataclass(frozen=True)
class AssetLink:
    id: EntityId
    project_id: Optional[EntityId]


@dataclass(frozen=True)
class VersionRef:
    """
    Polymorphic pointer from a version to its owner.

    entity_type is the raw stored label; it is normalised only when resolved.
    """

    entity_id: Optional[EntityId]
    entity_type: Optional[str]


class AccessStore(Protocol):
    """Lookup primitives supplied by the persistence layer."""

    async def list_all_project_ids(self) -> Set[EntityId]:
        ...

    async def list_permissions_for_user(self, user_id: EntityId) -> Iterable[PermissionRecord]:
        ...

    async def find_permission(
        self, user_id: EntityId, project_id: EntityId
    ) -> Optional[PermissionRecord]:
        ...

    async def find_episode(self, episode_id: EntityId) -> Optional[EpisodeLink]:
        ...

    async def find_sequence(self, sequence_id: EntityId) -> Optional[SequenceLink]:
        ...

    async def find_shot(self, shot_id: EntityId) -> Optional[ShotLink]:
        ...

    async def find_asset(self, asset_id: EntityId) -> Optional[AssetLink]:
        ...

    async def find_version(self, version_id: EntityId) -> Optional[VersionRef]:
        ...


class SqlAccessStore:
    """
    AccessStore backed by an AsyncSession.

    Every method selects only the columns a hop needs. Duplicate permission
    rows for one (user, project) pair surface as MultipleResultsFound.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all_project_ids(self) -> Set[EntityId]:
        result = await self.session.execute(select(Project.id))
        return {row[0] for row in result.all()}

    async def list_permissions_for_user(self, user_id: EntityId) -> List[PermissionRecord]:
        query = select(ProjectPermission.project_id, ProjectPermission.role).where(
            ProjectPermission.user_id == user_id
        )
        result = await self.session.execute(query)
        return [
            PermissionRecord(project_id=project_id, role=ProjectRole(role))
            for project_id, role in result.all()
        ]

    async def find_permission(
        self, user_id: EntityId, project_id: EntityId
    ) -> Optional[PermissionRecord]:
        query = select(ProjectPermission.project_id, ProjectPermission.role).where(
            and_(
                ProjectPermission.user_id == user_id,
                ProjectPermission.project_id == project_id,
            )
        )
        result = await self.session.execute(query)
        row = result.one_or_none()
        if row is None:
            return None
        return PermissionRecord(project_id=row.project_id, role=ProjectRole(row.role))

    async def find_episode(self, episode_id: EntityId) -> Optional[EpisodeLink]:
        result = await self.session.execute(
            select(Episode.project_id).where(Episode.id == episode_id)
        )
        row = result.one_or_none()
        logger.debug("Episode lookup", extra={"episode_id": episode_id, "found": row is not None})
        if row is None:
            return None
        return EpisodeLink(id=episode_id, project_id=row.project_id)

    async def find_sequence(self, sequence_id: EntityId) -> Optional[SequenceLink]:
        result = await self.session.execute(
            select(Sequence.episode_id).where(Sequence.id == sequence_id)
        )
        row = result.one_or_none()
        logger.debug("Sequence lookup", extra={"sequence_id": sequence_id, "found": row is not None})
        if row is None:
            return None
        return SequenceLink(id=sequence_id, episode_id=row.episode_id)

    async def find_shot(self, shot_id: EntityId) -> Optional[ShotLink]:
        result = await self.session.execute(
            select(Shot.sequence_id).where(Shot.id == shot_id)
        )
        row = result.one_or_none()
        logger.debug("Shot lookup", extra={"shot_id": shot_id, "found": row is not None})
        if row is None:
            return None
        return ShotLink(id=shot_id, sequence_id=row.sequence_id)

    async def find_asset(self, asset_id: EntityId) -> Optional[AssetLink]:
        result = await self.session.execute(
            select(Asset.project_id).where(Asset.id == asset_id)
        )
        row = result.one_or_none()
        logger.debug("Asset lookup", extra={"asset_id": asset_id, "found": row is not None})
        if row is None:
            return None
        return AssetLink(id=asset_id, project_id=row.project_id)

    async def find_version(self, version_id: EntityId) -> Optional[VersionRef]:
        result = await self.session.execute(
            select(Version.entity_id, Version.entity_type).where(Version.id == version_id)
        )
        row = result.one_or_none()
        logger.debug("Version lookup", extra={"version_id": version_id, "found": row is not None})
        if row is None:
            return None
        return VersionRef(entity_id=row.entity_id, entity_type=row.entity_type)
