"""
Authentication Utility - JWT verification.

Accounts, passwords and sessions live with the external auth provider.
It signs access tokens with a shared secret; this module only verifies them
and exposes the caller's identity to routes.

Provides:
- JWT token verification
- FastAPI dependency for protected routes
"""

from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from placeprep.core.config import get_settings

settings = get_settings()

# Bearer token extractor
bearer_scheme = HTTPBearer()


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    options = {"verify_aud": settings.jwt_audience is not None}
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options
        )
    except JWTError:
        return None


async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @app.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(credentials.credentials)
    if not payload:
        raise credentials_exception

    user_id = payload.get("sub")
    if not user_id:
        raise credentials_exception

    return {"user_id": str(user_id), "email": payload.get("email")}
