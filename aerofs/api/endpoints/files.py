"""File API endpoints, plus the parsers shared by file and folder resources."""

from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import Any

import httpx

from aerofs.api.http_client import HttpClient
from aerofs.models.files import Children, ContentState, File, Folder, ParentPath


def get_file(http: HttpClient, file_id: str, *, fields: Iterable[str] | None = None) -> File:
    """Get file metadata, optionally with "path" and "content_state"."""
    response = http.request_json("GET", f"/files/{file_id}", params=fields_params(fields))
    return parse_file(response)


def get_file_path(http: HttpClient, file_id: str) -> ParentPath:
    """Get the chain of folders leading to a file."""
    response = http.request_json("GET", f"/files/{file_id}/path")
    return parse_parent_path(response)


def create_file(http: HttpClient, parent_id: str, name: str) -> File:
    """Create an empty file in a folder."""
    response = http.request_json("POST", "/files", json={"parent": parent_id, "name": name})
    return parse_file(response)


def move_file(http: HttpClient, file_id: str, parent_id: str, name: str) -> File:
    """Move and/or rename a file."""
    response = http.request_json(
        "PUT", f"/files/{file_id}", json={"parent": parent_id, "name": name}
    )
    return parse_file(response)


def delete_file(http: HttpClient, file_id: str, *, if_match: str | None = None) -> None:
    """Delete a file; fails with 412 when if_match no longer matches its ETag."""
    http.request("DELETE", f"/files/{file_id}", headers=if_match_header(if_match))


def stream_file_content(
    http: HttpClient, file_id: str, *, chunk_size: int | None = None
) -> Iterator[bytes]:
    """Stream the content of a file."""
    return http.stream("GET", f"/files/{file_id}/content", chunk_size=chunk_size)


def upload_chunk(
    http: HttpClient,
    file_id: str,
    chunk: bytes,
    *,
    content_range: str,
    upload_id: str | None = None,
    if_match: str | None = None,
) -> httpx.Response:
    """
    Send one request of a chunked content upload.

    Args:
        http: Configured HTTP client.
        file_id: Target file.
        chunk: Chunk bytes; empty for the request that commits the upload.
        content_range: Value of the Content-Range header.
        upload_id: Upload-ID returned by the first chunk, if any.
        if_match: Expected ETag of the current content.

    Returns:
        Raw response, whose Upload-ID and ETag headers drive the upload.
    """
    headers = {
        "Content-Range": content_range,
        "Content-Type": "application/octet-stream",
        **if_match_header(if_match),
    }
    if upload_id is not None:
        headers["Upload-ID"] = upload_id
    return http.request("PUT", f"/files/{file_id}/content", content=chunk, headers=headers)


def fields_params(fields: Iterable[str] | None) -> dict[str, str] | None:
    if not fields:
        return None
    return {"fields": ",".join(fields)}


def if_match_header(etag: str | None) -> dict[str, str]:
    return {"If-Match": etag} if etag else {}


def parse_file(data: dict[str, Any]) -> File:
    content_state = data.get("content_state")
    return File(
        file_id=data["id"],
        name=data["name"],
        parent_id=data.get("parent"),
        size=data.get("size"),
        mime_type=data.get("mime_type", ""),
        etag=data.get("etag"),
        last_modified=_parse_timestamp(data.get("last_modified")),
        content_state=ContentState(content_state) if content_state else None,
        path=parse_parent_path(data["path"]) if data.get("path") else None,
    )


def parse_folder(data: dict[str, Any]) -> Folder:
    return Folder(
        folder_id=data["id"],
        name=data["name"],
        parent_id=data.get("parent"),
        is_shared=bool(data.get("is_shared", False)),
        sid=data.get("sid"),
        path=parse_parent_path(data["path"]) if data.get("path") else None,
        children=(
            parse_children(data["children"], parent_id=data["id"])
            if data.get("children")
            else None
        ),
    )


def parse_parent_path(data: dict[str, Any]) -> ParentPath:
    return ParentPath(folders=tuple(parse_folder(f) for f in data.get("folders", [])))


def parse_children(data: dict[str, Any], *, parent_id: str | None = None) -> Children:
    return Children(
        parent_id=data.get("parent", parent_id or ""),
        folders=tuple(parse_folder(f) for f in data.get("folders", [])),
        files=tuple(parse_file(f) for f in data.get("files", [])),
    )


def _parse_timestamp(timestamp: str | None) -> datetime | None:
    """Parse an ISO 8601 timestamp ("2013-12-04T23:19:38Z")."""
    if not timestamp:
        return None
    return datetime.fromisoformat(timestamp)
