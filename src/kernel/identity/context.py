"""
Per-request identity handed to every permission check.
"""

from dataclasses import dataclass
from typing import Union

from src.kernel.models.user import UserRole
from src.kernel.types import EntityId


@dataclass(frozen=True)
class UserContext:
    """
    Who is asking. Built per request from the identity source and passed
    explicitly; never stored on the core or in ambient state.
    """

    user_id: EntityId
    global_role: Union[UserRole, str]

    @property
    def is_admin(self) -> bool:
        return self.global_role == UserRole.ADMIN
