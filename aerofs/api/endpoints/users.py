"""User API endpoints."""

from typing import Any

from aerofs.api.endpoints.shares import parse_invitation, parse_shared_folder
from aerofs.api.http_client import HttpClient
from aerofs.models.users import User


def get_user(http: HttpClient, email: str) -> User:
    """Get a user with their shares and pending invitations."""
    response = http.request_json("GET", f"/users/{email}")
    return parse_user(response)


def create_user(http: HttpClient, email: str, first_name: str, last_name: str) -> User:
    """Create a user (organization admin only)."""
    response = http.request_json(
        "POST",
        "/users",
        json={"email": email, "first_name": first_name, "last_name": last_name},
    )
    return parse_user(response)


def update_user(http: HttpClient, email: str, first_name: str, last_name: str) -> User:
    """Update a user's name."""
    response = http.request_json(
        "PUT",
        f"/users/{email}",
        json={"first_name": first_name, "last_name": last_name},
    )
    return parse_user(response)


def delete_user(http: HttpClient, email: str) -> None:
    http.request("DELETE", f"/users/{email}")


def change_password(http: HttpClient, email: str, password: str) -> None:
    """Set a new password; the body is the password as a JSON string."""
    http.request("PUT", f"/users/{email}/password", json=password)


def disable_password(http: HttpClient, email: str) -> None:
    """Disable password login; the user must reset it to sign in again."""
    http.request("DELETE", f"/users/{email}/password")


def parse_user(data: dict[str, Any]) -> User:
    return User(
        email=data["email"],
        first_name=data.get("first_name", ""),
        last_name=data.get("last_name", ""),
        shares=tuple(parse_shared_folder(s) for s in data.get("shares", [])),
        invitations=tuple(parse_invitation(i) for i in data.get("invitations", [])),
    )
