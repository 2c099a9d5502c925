"""
Access failures raised by the permission core.

PermissionDenied and EntityUnresolvable are never conflated: the first means
the project was found but the role is insufficient, the second means no
project could be reached from the entity at all.
"""

from typing import Any, Optional

from src.kernel.models.project import ProjectRole


class AccessError(Exception):
    """Base class for refused access."""

    code = "access_denied"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PermissionDenied(AccessError):
    """The user's effective role on a resolved project is too low."""

    code = "permission_denied"

    def __init__(
        self,
        project_id: Any,
        min_role: ProjectRole,
        message: Optional[str] = None,
    ):
        super().__init__(message or "You do not have access to this project")
        self.project_id = project_id
        self.min_role = min_role


class EntityUnresolvable(AccessError):
    """The ownership chain could not be followed up to a project."""

    code = "entity_unresolvable"

    def __init__(self, entity_kind: str, entity_id: Any):
        label = str(getattr(entity_kind, "value", entity_kind)).capitalize()
        super().__init__(f"{label} not found or not associated with a project")
        self.entity_kind = entity_kind
        self.entity_id = entity_id
