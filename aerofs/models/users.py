"""
User domain models.
"""

from dataclasses import dataclass

from aerofs.models.shares import Invitation, SharedFolder


@dataclass(frozen=True, kw_only=True)
class User:
    """
    Represents an AeroFS user.

    Attributes:
        email: User identifier.
        first_name: Given name.
        last_name: Family name.
        shares: Shared folders the user is a member of.
        invitations: Pending shared folder invitations.
    """

    email: str
    first_name: str = ""
    last_name: str = ""
    shares: tuple[SharedFolder, ...] = ()
    invitations: tuple[Invitation, ...] = ()

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
