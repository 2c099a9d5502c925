"""
Ownership chain resolution: from any production entity up to its project.

    Shot -> Sequence -> Episode -> Project
    Asset -> Project
    Version -> (asset | sequence | episode | project)

Resolution stops at the first broken link and returns None; it never raises
for a missing row. Hops inside one call are awaited strictly in order since
each hop's input is the previous hop's output.
"""

from enum import Enum
from typing import Optional, Union

from src.kernel.permissions.store import AccessStore, VersionRef
from src.kernel.types import EntityId


class EntityKind(str, Enum):
    """Kinds of entity an access check can start from."""
    PROJECT = "project"
    EPISODE = "episode"
    SEQUENCE = "sequence"
    SHOT = "shot"
    ASSET = "asset"
    VERSION = "version"


class VersionEntityType(str, Enum):
    """Owner kinds a version may point at."""
    ASSET = "asset"
    SEQUENCE = "sequence"
    EPISODE = "episode"
    PROJECT = "project"

    @classmethod
    def parse(cls, label: Optional[str]) -> Optional["VersionEntityType"]:
        """Case-insensitive match; None for empty or unrecognised labels."""
        if not label:
            return None
        try:
            return cls(label.lower())
        except ValueError:
            return None


class EntityChainResolver:
    """Walks parent pointers through an AccessStore. Stateless; no caching."""

    def __init__(self, store: AccessStore):
        self.store = store

    async def resolve_project_id(
        self,
        entity_kind: Union[EntityKind, str],
        entity_id: Union[EntityId, VersionRef, None],
    ) -> Optional[EntityId]:
        """
        Project id owning the entity, or None if the chain cannot be followed.

        For EntityKind.VERSION, entity_id may be a VersionRef (resolved
        directly) or a version id (loaded first).
        """
        if entity_id is None:
            return None

        kind = EntityKind(entity_kind)

        if kind is EntityKind.PROJECT:
            return entity_id
        if kind is EntityKind.EPISODE:
            return await self.project_id_from_episode(entity_id)
        if kind is EntityKind.SEQUENCE:
            return await self.project_id_from_sequence(entity_id)
        if kind is EntityKind.SHOT:
            return await self.project_id_from_shot(entity_id)
        if kind is EntityKind.ASSET:
            return await self.project_id_from_asset(entity_id)

        if isinstance(entity_id, VersionRef):
            return await self.project_id_from_version(entity_id)
        version = await self.store.find_version(entity_id)
        if version is None:
            return None
        return await self.project_id_from_version(version)

    async def project_id_from_episode(self, episode_id: EntityId) -> Optional[EntityId]:
        episode = await self.store.find_episode(episode_id)
        if episode is None:
            return None
        return episode.project_id

    async def project_id_from_sequence(self, sequence_id: EntityId) -> Optional[EntityId]:
        sequence = await self.store.find_sequence(sequence_id)
        if sequence is None or sequence.episode_id is None:
            return None
        return await self.project_id_from_episode(sequence.episode_id)

    async def project_id_from_shot(self, shot_id: EntityId) -> Optional[EntityId]:
        shot = await self.store.find_shot(shot_id)
        if shot is None or shot.sequence_id is None:
            return None
        return await self.project_id_from_sequence(shot.sequence_id)

    async def project_id_from_asset(self, asset_id: EntityId) -> Optional[EntityId]:
        asset = await self.store.find_asset(asset_id)
        if asset is None:
            return None
        return asset.project_id

    async def project_id_from_version(self, version: VersionRef) -> Optional[EntityId]:
        """
        Dispatch on the version's owner type.

        Episode owners are looked up (a dangling episode id yields None);
        project owners are taken as-is without an existence check.
        """
        if version.entity_id is None:
            return None

        owner_type = VersionEntityType.parse(version.entity_type)
        if owner_type is None:
            return None

        if owner_type is VersionEntityType.ASSET:
            return await self.project_id_from_asset(version.entity_id)
        if owner_type is VersionEntityType.SEQUENCE:
            return await self.project_id_from_sequence(version.entity_id)
        if owner_type is VersionEntityType.EPISODE:
            return await self.project_id_from_episode(version.entity_id)
        return version.entity_id
