"""
Read-only view over users' global roles and per-project assignments.
"""

from typing import Optional, Set

from src.kernel.identity.context import UserContext
from src.kernel.models.project import ProjectRole
from src.kernel.permissions.store import AccessStore
from src.kernel.types import EntityId


class PermissionLookup:
    """Answers "who holds what" without applying any policy defaults."""

    def __init__(self, store: AccessStore):
        self.store = store

    @staticmethod
    def is_global_admin(user: Optional[UserContext]) -> bool:
        """True only for a present user whose global role is admin. No lookup."""
        return user is not None and user.is_admin

    async def role_on(self, user_id: EntityId, project_id: EntityId) -> Optional[ProjectRole]:
        """The user's role on the project, or None when no record exists."""
        permission = await self.store.find_permission(user_id, project_id)
        if permission is None:
            return None
        return permission.role

    async def accessible_project_ids(self, user: Optional[UserContext]) -> Set[EntityId]:
        """
        Projects the user can see: all of them for an admin, otherwise every
        project the user holds any role on.

        This is a visibility list for filtering queries. It says nothing about
        the role held and must not be used to authorize writes.
        """
        if user is None:
            return set()
        if self.is_global_admin(user):
            return set(await self.store.list_all_project_ids())
        permissions = await self.store.list_permissions_for_user(user.user_id)
        return {permission.project_id for permission in permissions}
