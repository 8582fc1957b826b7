"""
Authorization predicates over decoded token claims.

These never touch the token or the database: decoding happens in
app.core.security and the helpers in app.core.deps call these
to decide allow/deny.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""
    subject: str
    is_admin: bool = False


def is_admin(claims: TokenClaims) -> bool:
    return claims.is_admin is True


def is_self_or_admin(claims: TokenClaims, target: str) -> bool:
    """True if the claims belong to `target` or to any admin."""
    return claims.subject == target or is_admin(claims)
