"""
Domain models for AeroFS.

These are immutable (frozen) dataclasses representing the core domain concepts.
"""

from aerofs.models.auth import OAuthScope, TokenResponse
from aerofs.models.files import (
    ROOT_FOLDER_ID,
    Children,
    ContentState,
    File,
    Folder,
    ParentPath,
)
from aerofs.models.shares import (
    Invitation,
    Member,
    PendingMember,
    Permission,
    SharedFolder,
)
from aerofs.models.users import User

__all__ = [
    # Auth
    "OAuthScope",
    "TokenResponse",
    # Files
    "ROOT_FOLDER_ID",
    "File",
    "Folder",
    "ParentPath",
    "Children",
    "ContentState",
    # Users
    "User",
    # ACL
    "Permission",
    "SharedFolder",
    "Member",
    "PendingMember",
    "Invitation",
]
