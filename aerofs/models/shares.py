"""
Shared folder and ACL domain models.
"""

from dataclasses import dataclass
from enum import StrEnum


class Permission(StrEnum):
    """Permissions granted on a shared folder, on top of read access."""

    WRITE = "WRITE"
    MANAGE = "MANAGE"


@dataclass(frozen=True, kw_only=True)
class Member:
    """A user with access to a shared folder."""

    email: str
    first_name: str = ""
    last_name: str = ""
    permissions: frozenset[Permission] = frozenset()

    @property
    def can_write(self) -> bool:
        return Permission.WRITE in self.permissions

    @property
    def can_manage(self) -> bool:
        return Permission.MANAGE in self.permissions


@dataclass(frozen=True, kw_only=True)
class PendingMember:
    """A user invited to a shared folder who has not accepted yet."""

    email: str
    invited_by: str
    first_name: str = ""
    last_name: str = ""
    permissions: frozenset[Permission] = frozenset()
    note: str = ""


@dataclass(frozen=True, kw_only=True)
class SharedFolder:
    """
    Represents a shared folder (a "share").

    `members` and `pending` are empty when the listing endpoint omits them.
    """

    sid: str
    name: str
    members: tuple[Member, ...] = ()
    pending: tuple[PendingMember, ...] = ()
    is_external: bool = False
    caller_effective_permissions: frozenset[Permission] = frozenset()


@dataclass(frozen=True, kw_only=True)
class Invitation:
    """An invitation for the caller to join a shared folder."""

    share_id: str
    share_name: str
    invited_by: str
    permissions: frozenset[Permission] = frozenset()
