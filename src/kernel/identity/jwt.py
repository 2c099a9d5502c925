"""
Bearer token verification.

Tokens are issued by the identity service; this side only decodes them and
checks they are unexpired access tokens.
"""

from datetime import datetime, timezone
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel

from src.config import get_settings


class AccessTokenPayload(BaseModel):
    """JWT access token payload."""
    
    sub: str  # User ID
    role: str  # Global role
    email: Optional[str] = None
    exp: datetime
    iat: Optional[datetime] = None
    jti: Optional[str] = None


class TokenVerifier:
    """Decodes and validates access tokens signed with a shared secret."""
    
    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
    ):
        settings = get_settings()
        self.secret_key = secret_key or settings.secret_key
        self.algorithm = algorithm or settings.algorithm
    
    def verify_access_token(self, token: str) -> Optional[AccessTokenPayload]:
        """
        Verify and decode an access token.
        
        Args:
            token: JWT access token
            
        Returns:
            AccessTokenPayload if valid, None otherwise
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
            )
        except JWTError:
            return None
        
        if payload.get("type") != "access":
            return None
        if "sub" not in payload or "role" not in payload or "exp" not in payload:
            return None
        
        iat = payload.get("iat")
        return AccessTokenPayload(
            sub=str(payload["sub"]),
            role=payload["role"],
            email=payload.get("email"),
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            iat=datetime.fromtimestamp(iat, tz=timezone.utc) if iat is not None else None,
            jti=payload.get("jti"),
        )


_verifier: Optional[TokenVerifier] = None


def get_token_verifier() -> TokenVerifier:
    """Get or create the default verifier."""
    global _verifier
    if _verifier is None:
        _verifier = TokenVerifier()
    return _verifier


def verify_access_token(token: str) -> Optional[AccessTokenPayload]:
    """Verify an access token."""
    return get_token_verifier().verify_access_token(token)
