"""
Total order over project roles.
"""

from src.kernel.models.project import ProjectRole


# Higher rank includes everything a lower rank may do. Every ProjectRole
# needs an entry here; enum declaration order is never consulted.
PROJECT_ROLE_HIERARCHY = {
    ProjectRole.VIEWER: 1,
    ProjectRole.CONTRIBUTOR: 2,
    ProjectRole.OWNER: 3,
}


def rank(role: ProjectRole) -> int:
    """Rank of a role; raises KeyError for a role without an explicit rank."""
    return PROJECT_ROLE_HIERARCHY[ProjectRole(role)]


def satisfies(have: ProjectRole, need: ProjectRole) -> bool:
    """True if holding `have` meets a requirement of at least `need`."""
    return rank(have) >= rank(need)
