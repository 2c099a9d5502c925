"""
Project access evaluation.
"""

from typing import Optional, Set, Union

from src.kernel.identity.context import UserContext
from src.kernel.models.project import ProjectRole
from src.kernel.permissions.errors import EntityUnresolvable, PermissionDenied
from src.kernel.permissions.lookup import PermissionLookup
from src.kernel.permissions.resolver import EntityChainResolver, EntityKind
from src.kernel.permissions.roles import satisfies
from src.kernel.permissions.store import AccessStore, VersionRef
from src.kernel.types import EntityId


class AccessEvaluator:
    """
    Decides whether a user may act on a project or anything beneath it.

    Decision order:
    1. Global admin - allowed, no lookup performed
    2. No user context - refused
    3. No ProjectPermission record - refused
    4. Record role compared against the required minimum

    Entity checks first resolve the owning project; an entity that cannot be
    resolved is refused with EntityUnresolvable, never treated as accessible.
    Nothing here retries, logs, or swallows store errors.
    """

    def __init__(self, store: AccessStore):
        self.lookup = PermissionLookup(store)
        self.resolver = EntityChainResolver(store)

    def is_admin(self, user: Optional[UserContext]) -> bool:
        """Check if user is a global admin."""
        return self.lookup.is_global_admin(user)

    async def accessible_project_ids(self, user: Optional[UserContext]) -> Set[EntityId]:
        """Project ids visible to the user; see PermissionLookup.accessible_project_ids."""
        return await self.lookup.accessible_project_ids(user)

    async def has_permission(
        self,
        project_id: EntityId,
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> bool:
        """
        Check if user has at least min_role on a project.

        Args:
            project_id: The project ID
            user: The requesting user, or None when unauthenticated
            min_role: Minimum required role (VIEWER when omitted)

        Returns:
            True if the user may proceed
        """
        if self.is_admin(user):
            return True
        if user is None:
            return False

        role = await self.lookup.role_on(user.user_id, project_id)
        if role is None:
            return False
        return satisfies(role, min_role)

    async def verify(
        self,
        project_id: EntityId,
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> None:
        """
        Verify user has permission on a project.

        Raises:
            PermissionDenied: If the user's role does not satisfy min_role
        """
        if not await self.has_permission(project_id, user, min_role):
            raise PermissionDenied(project_id, min_role)

    async def resolve_project_id(
        self,
        entity_kind: Union[EntityKind, str],
        entity_id: Union[EntityId, VersionRef, None],
    ) -> Optional[EntityId]:
        """Owning project id of an entity, or None if unresolvable."""
        return await self.resolver.resolve_project_id(entity_kind, entity_id)

    async def verify_via_entity(
        self,
        entity_kind: Union[EntityKind, str],
        entity_id: Union[EntityId, VersionRef, None],
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> EntityId:
        """
        Resolve an entity to its project and verify access to that project.

        Resolution happens before the admin short-circuit, so even admins get
        EntityUnresolvable for entities that do not lead to a project.

        Returns:
            The resolved project id

        Raises:
            EntityUnresolvable: If no project can be reached from the entity
            PermissionDenied: If the project resolves but the role is too low
        """
        kind = EntityKind(entity_kind)
        project_id = await self.resolver.resolve_project_id(kind, entity_id)
        if project_id is None:
            raise EntityUnresolvable(kind, entity_id)
        await self.verify(project_id, user, min_role)
        return project_id

    # Per-kind shortcuts used by the entity services

    async def verify_episode_access(
        self,
        episode_id: EntityId,
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> EntityId:
        return await self.verify_via_entity(EntityKind.EPISODE, episode_id, user, min_role)

    async def verify_sequence_access(
        self,
        sequence_id: EntityId,
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> EntityId:
        return await self.verify_via_entity(EntityKind.SEQUENCE, sequence_id, user, min_role)

    async def verify_shot_access(
        self,
        shot_id: EntityId,
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> EntityId:
        return await self.verify_via_entity(EntityKind.SHOT, shot_id, user, min_role)

    async def verify_asset_access(
        self,
        asset_id: EntityId,
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> EntityId:
        return await self.verify_via_entity(EntityKind.ASSET, asset_id, user, min_role)

    async def verify_version_access(
        self,
        version: Union[EntityId, VersionRef],
        user: Optional[UserContext],
        min_role: ProjectRole = ProjectRole.VIEWER,
    ) -> EntityId:
        """Accepts either a version id or an already loaded VersionRef."""
        return await self.verify_via_entity(EntityKind.VERSION, version, user, min_role)
