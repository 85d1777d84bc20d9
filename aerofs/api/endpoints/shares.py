"""Shared folder (ACL) API endpoints: shares, members, pending members, invitations."""

from collections.abc import Iterable
from typing import Any

from aerofs.api.http_client import HttpClient
from aerofs.models.shares import Invitation, Member, PendingMember, Permission, SharedFolder


def list_shared_folders(http: HttpClient, email: str) -> list[SharedFolder]:
    """List the shared folders a user is a member of."""
    response = http.request_json("GET", f"/users/{email}/shares")
    return [parse_shared_folder(s) for s in response or []]


def get_shared_folder(http: HttpClient, sid: str) -> SharedFolder:
    """Get a shared folder with its members and pending members."""
    response = http.request_json("GET", f"/shares/{sid}")
    return parse_shared_folder(response)


def create_shared_folder(http: HttpClient, name: str) -> SharedFolder:
    """Create a new shared folder at the root of the caller's AeroFS folder."""
    response = http.request_json("POST", "/shares", json={"name": name})
    return parse_shared_folder(response)


def list_members(http: HttpClient, sid: str) -> list[Member]:
    response = http.request_json("GET", f"/shares/{sid}/members")
    return [parse_member(m) for m in response or []]


def get_member(http: HttpClient, sid: str, email: str) -> Member:
    response = http.request_json("GET", f"/shares/{sid}/members/{email}")
    return parse_member(response)


def add_member(
    http: HttpClient, sid: str, email: str, permissions: Iterable[Permission]
) -> Member:
    """Add an existing user directly to a shared folder."""
    response = http.request_json(
        "POST",
        f"/shares/{sid}/members",
        json={"email": email, "permissions": _permission_list(permissions)},
    )
    return parse_member(response)


def set_member_permissions(
    http: HttpClient, sid: str, email: str, permissions: Iterable[Permission]
) -> Member:
    response = http.request_json(
        "PUT",
        f"/shares/{sid}/members/{email}",
        json={"permissions": _permission_list(permissions)},
    )
    return parse_member(response)


def remove_member(http: HttpClient, sid: str, email: str) -> None:
    http.request("DELETE", f"/shares/{sid}/members/{email}")


def list_pending_members(http: HttpClient, sid: str) -> list[PendingMember]:
    response = http.request_json("GET", f"/shares/{sid}/pending")
    return [parse_pending_member(p) for p in response or []]


def get_pending_member(http: HttpClient, sid: str, email: str) -> PendingMember:
    response = http.request_json("GET", f"/shares/{sid}/pending/{email}")
    return parse_pending_member(response)


def invite_member(
    http: HttpClient,
    sid: str,
    email: str,
    permissions: Iterable[Permission],
    note: str = "",
) -> PendingMember:
    """Invite a user to a shared folder."""
    response = http.request_json(
        "POST",
        f"/shares/{sid}/pending",
        json={"email": email, "permissions": _permission_list(permissions), "note": note},
    )
    return parse_pending_member(response)


def revoke_invitation(http: HttpClient, sid: str, email: str) -> None:
    http.request("DELETE", f"/shares/{sid}/pending/{email}")


def list_invitations(http: HttpClient, email: str) -> list[Invitation]:
    response = http.request_json("GET", f"/users/{email}/invitations")
    return [parse_invitation(i) for i in response or []]


def get_invitation(http: HttpClient, email: str, sid: str) -> Invitation:
    response = http.request_json("GET", f"/users/{email}/invitations/{sid}")
    return parse_invitation(response)


def accept_invitation(
    http: HttpClient, email: str, sid: str, *, external: bool = False
) -> SharedFolder:
    """
    Accept an invitation.

    Args:
        http: Configured HTTP client.
        email: Invited user.
        sid: Shared folder ID.
        external: Join as an external root instead of under the user's AeroFS folder.

    Returns:
        The joined shared folder.
    """
    response = http.request_json(
        "POST",
        f"/users/{email}/invitations/{sid}",
        params={"external": 1} if external else None,
    )
    return parse_shared_folder(response)


def ignore_invitation(http: HttpClient, email: str, sid: str) -> None:
    http.request("DELETE", f"/users/{email}/invitations/{sid}")


def parse_shared_folder(data: dict[str, Any]) -> SharedFolder:
    return SharedFolder(
        sid=data["id"],
        name=data["name"],
        members=tuple(parse_member(m) for m in data.get("members", [])),
        pending=tuple(parse_pending_member(p) for p in data.get("pending", [])),
        is_external=bool(data.get("is_external", False)),
        caller_effective_permissions=_parse_permissions(
            data.get("caller_effective_permissions")
        ),
    )


def parse_member(data: dict[str, Any]) -> Member:
    return Member(
        email=data["email"],
        first_name=data.get("first_name", ""),
        last_name=data.get("last_name", ""),
        permissions=_parse_permissions(data.get("permissions")),
    )


def parse_pending_member(data: dict[str, Any]) -> PendingMember:
    return PendingMember(
        email=data["email"],
        invited_by=data.get("invited_by", ""),
        first_name=data.get("first_name", ""),
        last_name=data.get("last_name", ""),
        permissions=_parse_permissions(data.get("permissions")),
        note=data.get("note", ""),
    )


def parse_invitation(data: dict[str, Any]) -> Invitation:
    return Invitation(
        share_id=data["share_id"],
        share_name=data.get("share_name", ""),
        invited_by=data.get("invited_by", ""),
        permissions=_parse_permissions(data.get("permissions")),
    )


def _parse_permissions(values: list[str] | None) -> frozenset[Permission]:
    return frozenset(Permission(v) for v in values or [])


def _permission_list(permissions: Iterable[Permission]) -> list[str]:
    """Serialize permissions in a stable order."""
    return sorted({Permission(p).value for p in permissions})
