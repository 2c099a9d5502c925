"""
Schemas for access-check endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from src.kernel.models.project import ProjectRole
from src.kernel.permissions.resolver import EntityKind


class AccessibleProjectsResponse(BaseModel):
    """Projects a user can see."""
    
    user_id: int
    is_admin: bool
    project_ids: List[int] = Field(default_factory=list)


class PermissionCheckResponse(BaseModel):
    """Non-raising permission check on a project."""
    
    project_id: int
    min_role: ProjectRole
    allowed: bool


class EntityAccessResponse(BaseModel):
    """Successful access verification through an entity's ownership chain."""
    
    entity_kind: EntityKind
    entity_id: int
    project_id: int
    min_role: ProjectRole
    allowed: bool = True


class ProjectRoleResponse(BaseModel):
    """The caller's standing on a project."""
    
    project_id: int
    role: Optional[ProjectRole] = None
    is_admin: bool = False
