"""
Permission Core - project-level access control.
"""

from src.kernel.permissions.errors import AccessError, EntityUnresolvable, PermissionDenied
from src.kernel.permissions.lookup import PermissionLookup
from src.kernel.permissions.permission_service import AccessEvaluator
from src.kernel.permissions.resolver import EntityChainResolver, EntityKind, VersionEntityType
from src.kernel.permissions.roles import PROJECT_ROLE_HIERARCHY, rank, satisfies
from src.kernel.permissions.store import AccessStore, SqlAccessStore, VersionRef

__all__ = [
    "AccessError",
    "AccessEvaluator",
    "AccessStore",
    "EntityChainResolver",
    "EntityKind",
    "EntityUnresolvable",
    "PROJECT_ROLE_HIERARCHY",
    "PermissionDenied",
    "PermissionLookup",
    "SqlAccessStore",
    "VersionEntityType",
    "VersionRef",
    "rank",
    "satisfies",
]
