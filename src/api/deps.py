"""
FastAPI dependencies for authentication, project access, and database sessions.
"""

from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import async_session_maker
from src.kernel.identity.context import UserContext
from src.kernel.identity.jwt import verify_access_token
from src.kernel.models.project import ProjectRole
from src.kernel.models.user import User
from src.kernel.permissions.errors import AccessError
from src.kernel.permissions.permission_service import AccessEvaluator
from src.kernel.permissions.resolver import EntityKind
from src.kernel.permissions.store import SqlAccessStore
from src.logging_config import get_logger

logger = get_logger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency that yields database sessions."""
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    db: DbSession,
) -> UserContext:
    """Build the request's UserContext from the bearer token, or raise 401/403."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = verify_access_token(credentials.credentials)
    if not payload or not payload.sub.isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await db.get(User, int(payload.sub))
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    # The stored role wins over the token claim so demotions apply immediately
    return UserContext(user_id=user.id, global_role=user.role)


CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def get_access_evaluator(db: DbSession) -> AccessEvaluator:
    """Access evaluator bound to the request's session."""
    return AccessEvaluator(SqlAccessStore(db))


Evaluator = Annotated[AccessEvaluator, Depends(get_access_evaluator)]


class ProjectRoleChecker:
    """
    Dependency class enforcing a minimum project role on a route.

    The entity id is read from the path; the owning project is resolved and
    returned so the handler can scope its queries.

    Usage:
        @router.patch("/shots/{shot_id}")
        async def update_shot(
            shot_id: int,
            project_id: Annotated[int, Depends(ProjectRoleChecker(EntityKind.SHOT, ProjectRole.CONTRIBUTOR))],
        ):
            ...

    Refusals propagate as AccessError and are rendered by the application's
    exception handlers.
    """

    def __init__(
        self,
        entity_kind: EntityKind,
        min_role: ProjectRole = ProjectRole.VIEWER,
        path_param: Optional[str] = None,
    ):
        self.entity_kind = EntityKind(entity_kind)
        self.min_role = min_role
        self.path_param = path_param or f"{self.entity_kind.value}_id"

    async def __call__(
        self,
        request: Request,
        user: CurrentUser,
        evaluator: Evaluator,
    ) -> int:
        raw_id = request.path_params.get(self.path_param)
        if raw_id is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"{self.path_param} required in path for access check",
            )
        try:
            entity_id = int(raw_id)
        except ValueError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid {self.path_param}",
            )

        try:
            return await evaluator.verify_via_entity(
                self.entity_kind, entity_id, user, self.min_role
            )
        except AccessError as exc:
            logger.info(
                "Access refused",
                extra={
                    "user_id": user.user_id,
                    "entity_kind": self.entity_kind.value,
                    "entity_id": entity_id,
                    "min_role": self.min_role.value,
                    "reason": exc.code,
                },
            )
            raise


# Convenience dependency for routes keyed by project_id
RequireProjectView = Annotated[int, Depends(ProjectRoleChecker(EntityKind.PROJECT, ProjectRole.VIEWER))]


async def require_admin(user: CurrentUser, evaluator: Evaluator) -> UserContext:
    """Require the current user to be a global admin."""
    if not evaluator.is_admin(user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


AdminUser = Annotated[UserContext, Depends(require_admin)]
