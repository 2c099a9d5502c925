"""
Access-check endpoints.

Thin HTTP surface over the permission core so other services and the web
client can ask "may this user do X here" without duplicating the rules.
"""

from fastapi import APIRouter, HTTPException, Query, status

from src.api.deps import (
    AdminUser,
    CurrentUser,
    DbSession,
    Evaluator,
    RequireProjectView,
)
from src.kernel.identity.context import UserContext
from src.kernel.models.project import ProjectRole
from src.kernel.models.user import User
from src.kernel.permissions.resolver import EntityKind
from src.schemas.access import (
    AccessibleProjectsResponse,
    EntityAccessResponse,
    PermissionCheckResponse,
    ProjectRoleResponse,
)

router = APIRouter()


@router.get("/projects", response_model=AccessibleProjectsResponse)
async def list_accessible_projects(
    user: CurrentUser,
    evaluator: Evaluator,
):
    """List ids of the projects visible to the current user."""
    project_ids = await evaluator.accessible_project_ids(user)
    return AccessibleProjectsResponse(
        user_id=user.user_id,
        is_admin=evaluator.is_admin(user),
        project_ids=sorted(project_ids),
    )


@router.get("/users/{user_id}/projects", response_model=AccessibleProjectsResponse)
async def list_user_accessible_projects(
    user_id: int,
    _admin: AdminUser,
    evaluator: Evaluator,
    db: DbSession,
):
    """List ids of the projects visible to another user (admin only)."""
    target = await db.get(User, user_id)
    if not target:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    context = UserContext(user_id=target.id, global_role=target.role)
    project_ids = await evaluator.accessible_project_ids(context)
    return AccessibleProjectsResponse(
        user_id=target.id,
        is_admin=evaluator.is_admin(context),
        project_ids=sorted(project_ids),
    )


@router.get("/projects/{project_id}/permission", response_model=PermissionCheckResponse)
async def check_project_permission(
    project_id: int,
    user: CurrentUser,
    evaluator: Evaluator,
    min_role: ProjectRole = Query(ProjectRole.VIEWER),
):
    """Report whether the current user holds at least min_role; never refuses."""
    allowed = await evaluator.has_permission(project_id, user, min_role)
    return PermissionCheckResponse(
        project_id=project_id,
        min_role=min_role,
        allowed=allowed,
    )


@router.get("/projects/{project_id}/role", response_model=ProjectRoleResponse)
async def get_project_role(
    project_id: int,
    resolved_project_id: RequireProjectView,
    user: CurrentUser,
    evaluator: Evaluator,
):
    """The current user's role on a project they can view."""
    if evaluator.is_admin(user):
        return ProjectRoleResponse(project_id=resolved_project_id, is_admin=True)
    role = await evaluator.lookup.role_on(user.user_id, resolved_project_id)
    return ProjectRoleResponse(project_id=resolved_project_id, role=role)


@router.get("/{entity_kind}/{entity_id}", response_model=EntityAccessResponse)
async def verify_entity_access(
    entity_kind: EntityKind,
    entity_id: int,
    user: CurrentUser,
    evaluator: Evaluator,
    min_role: ProjectRole = Query(ProjectRole.VIEWER),
):
    """
    Verify access to any entity through its ownership chain.

    Refusals surface as 403 with code `permission_denied` (project found,
    role too low) or `entity_unresolvable` (no project reachable).
    """
    project_id = await evaluator.verify_via_entity(entity_kind, entity_id, user, min_role)
    return EntityAccessResponse(
        entity_kind=entity_kind,
        entity_id=entity_id,
        project_id=project_id,
        min_role=min_role,
    )
