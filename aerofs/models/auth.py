"""
Authorization-related domain models.
"""

from dataclasses import dataclass
from enum import StrEnum


class OAuthScope(StrEnum):
    """OAuth scopes a client application can request. Values are the wire tokens."""

    FILES_READ = "files.read"
    FILES_WRITE = "files.write"
    FILES_APPDATA = "files.appdata"
    USER_READ = "user.read"
    USER_WRITE = "user.write"
    USER_PASSWORD = "user.password"
    ACL_READ = "acl.read"
    ACL_WRITE = "acl.write"
    ACL_INVITATIONS = "acl.invitations"
    ORGANIZATION_ADMIN = "organization.admin"


@dataclass(frozen=True, kw_only=True)
class TokenResponse:
    """
    Result of an authorization-code exchange.

    Attributes:
        access_token: Bearer token for API requests.
        token_type: Token type, "bearer" for AeroFS.
        expires_in: Lifetime in seconds; 0 means the token does not expire.
        scopes: Granted scope tokens.
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int = 0
    scopes: frozenset[str] = frozenset()
