"""
FastAPI dependencies for authentication and authorization.

get_current_claims decodes the bearer token as a dependency. The role
checks (ensure_admin, ensure_self_or_admin) are called at the top of each
protected handler, so FastAPI has already validated the path, query and
body before any authorization decision is made. They work purely from the
token: no database lookup happens here, so authorization never depends on
whether the target resource exists.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError

from app.core.exceptions import UnauthorizedError
from app.core.permissions import TokenClaims, is_admin, is_self_or_admin
from app.core.security import claims_from_token

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenClaims:
    """
    Extract and validate the caller's claims from the JWT token.

    Raises:
        UnauthorizedError: If no token was sent or it fails verification
    """
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    try:
        return claims_from_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")


def ensure_admin(claims: TokenClaims) -> TokenClaims:
    """Allow only admin callers."""
    if not is_admin(claims):
        logger.warning(f"Admin access denied for {claims.subject}")
        raise UnauthorizedError("Admin access required")
    return claims


def ensure_self_or_admin(claims: TokenClaims, username: str) -> TokenClaims:
    """
    Allow the user named by the `username` path parameter, or any admin.
    """
    if not is_self_or_admin(claims, username):
        logger.warning(f"User {claims.subject} denied access to {username}")
        raise UnauthorizedError()
    return claims
