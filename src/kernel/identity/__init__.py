"""
Identity Core - who is asking.
"""

from src.kernel.identity.context import UserContext
from src.kernel.identity.jwt import (
    AccessTokenPayload,
    TokenVerifier,
    verify_access_token,
)

__all__ = [
    "UserContext",
    "AccessTokenPayload",
    "TokenVerifier",
    "verify_access_token",
]
