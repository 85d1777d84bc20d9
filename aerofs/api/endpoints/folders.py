"""Folder API endpoints."""

from collections.abc import Iterable

from aerofs.api.endpoints.files import (
    fields_params,
    if_match_header,
    parse_children,
    parse_folder,
    parse_parent_path,
)
from aerofs.api.http_client import HttpClient
from aerofs.models.files import ROOT_FOLDER_ID, Children, Folder, ParentPath


def get_folder(
    http: HttpClient, folder_id: str, *, fields: Iterable[str] | None = None
) -> Folder:
    """Get folder metadata, optionally with "path" and "children"."""
    response = http.request_json("GET", f"/folders/{folder_id}", params=fields_params(fields))
    return parse_folder(response)


def get_folder_path(http: HttpClient, folder_id: str) -> ParentPath:
    """Get the chain of folders leading to a folder."""
    response = http.request_json("GET", f"/folders/{folder_id}/path")
    return parse_parent_path(response)


def list_children(http: HttpClient, folder_id: str = ROOT_FOLDER_ID) -> Children:
    """List the files and folders directly inside a folder."""
    response = http.request_json("GET", f"/folders/{folder_id}/children")
    return parse_children(response, parent_id=folder_id)


def create_folder(http: HttpClient, parent_id: str, name: str) -> Folder:
    """Create a folder."""
    response = http.request_json("POST", "/folders", json={"parent": parent_id, "name": name})
    return parse_folder(response)


def move_folder(http: HttpClient, folder_id: str, parent_id: str, name: str) -> Folder:
    """Move and/or rename a folder."""
    response = http.request_json(
        "PUT", f"/folders/{folder_id}", json={"parent": parent_id, "name": name}
    )
    return parse_folder(response)


def delete_folder(http: HttpClient, folder_id: str, *, if_match: str | None = None) -> None:
    """Delete a folder and everything in it."""
    http.request("DELETE", f"/folders/{folder_id}", headers=if_match_header(if_match))


def share_folder(http: HttpClient, folder_id: str) -> None:
    """Convert a folder into a shared folder."""
    http.request("PUT", f"/folders/{folder_id}/is_shared")
