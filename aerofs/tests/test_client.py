import io
import json
from pathlib import Path

import httpx
import pytest

from aerofs.client import AeroFSClient, create_client
from aerofs.config import Configuration
from aerofs.exceptions import InvalidArgumentError, NotFoundError
from aerofs.models.shares import Permission
from aerofs.tests.utils.mock_transport import MockTransport

# Factory tests


@pytest.mark.parametrize("token", ["", None])
def test_create_client_rejects_empty_token(config: Configuration, token: str | None) -> None:
    with pytest.raises(InvalidArgumentError, match="access_token"):
        create_client(token, config)


def test_create_client_rejects_zero_chunk_size(config: Configuration) -> None:
    config.upload_chunk_size = 0

    with pytest.raises(InvalidArgumentError, match="upload_chunk_size"):
        create_client("token", config)


def test_create_client_checks_token_before_config() -> None:
    with pytest.raises(InvalidArgumentError, match="access_token"):
        create_client("", Configuration())


def test_create_client_populates_fields() -> None:
    config = Configuration(
        host_name="https://share.example.com", api_version="1.2", upload_chunk_size=4096
    )

    with create_client("abc123", config) as client:
        assert client.endpoint == "https://share.example.com/api/v1.2"
        assert client.access_token == "abc123"
        assert client.upload_chunk_size == 4096
        assert len(client.upload_buffer) == 4096
        assert client.upload_buffer == bytearray(4096)


def test_create_client_buffer_matches_chunk_size(config: Configuration) -> None:
    config.upload_chunk_size = 1

    with create_client("token", config) as client:
        assert len(client.upload_buffer) == 1


def test_create_client_is_idempotent_but_allocates_new_buffers(config: Configuration) -> None:
    with create_client("token", config) as first, create_client("token", config) as second:
        assert first.endpoint == second.endpoint
        assert first.access_token == second.access_token
        assert first.upload_buffer == second.upload_buffer
        assert first.upload_buffer is not second.upload_buffer


def test_client_fields_are_read_only(client: AeroFSClient) -> None:
    with pytest.raises(AttributeError):
        client.access_token = "other"  # type: ignore[misc]


# Facade tests


def test_requests_use_endpoint_and_bearer_token(
    client: AeroFSClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(json_data={"parent": "root", "folders": [], "files": []})

    client.list_children()

    request = mock_transport.requests[0]
    assert str(request.url) == "https://share.example.com/api/v1.2/folders/root/children"
    assert request.headers["authorization"] == "Bearer abc123"


def test_get_file_parses_metadata(client: AeroFSClient, mock_transport: MockTransport) -> None:
    mock_transport.add_response(
        json_data={
            "id": "f1",
            "name": "report.pdf",
            "parent": "d1",
            "size": 1024,
            "mime_type": "application/pdf",
            "etag": "etag-1",
            "last_modified": "2013-12-04T23:19:38Z",
            "content_state": "AVAILABLE",
        }
    )

    file = client.get_file("f1", fields=["content_state"])

    assert file.name == "report.pdf"
    assert file.size == 1024
    assert file.is_available
    assert mock_transport.requests[0].url.params["fields"] == "content_state"


def test_get_file_raises_not_found(client: AeroFSClient, mock_transport: MockTransport) -> None:
    mock_transport.add_response(
        status_code=httpx.codes.NOT_FOUND,
        json_data={"type": "NOT_FOUND", "message": "No such file"},
    )

    with pytest.raises(NotFoundError, match="No such file"):
        client.get_file("missing")


def test_download_file_returns_content(
    client: AeroFSClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(content=b"hello world")

    assert client.download_file("f1") == b"hello world"
    assert mock_transport.requests[0].url.path == "/api/v1.2/files/f1/content"


def test_download_to_file_writes_destination(
    client: AeroFSClient, mock_transport: MockTransport, tmp_path: Path
) -> None:
    mock_transport.add_response(content=b"payload")
    destination = tmp_path / "nested" / "out.bin"

    client.download_to_file("f1", destination)

    assert destination.read_bytes() == b"payload"


def test_upload_file_content_uses_chunk_size(mock_transport: MockTransport) -> None:
    config = Configuration(
        host_name="https://share.example.com", api_version="1.2", upload_chunk_size=4
    )
    mock_transport.add_response(headers={"Upload-ID": "up-1"})
    mock_transport.add_response(headers={"Upload-ID": "up-1"})
    mock_transport.add_response(headers={"ETag": '"etag-2"'})

    with create_client("token", config, transport=mock_transport) as client:
        etag = client.upload_file_content("f1", io.BytesIO(b"abcdef"))

    assert etag == '"etag-2"'
    assert [r.content for r in mock_transport.requests] == [b"abcd", b"ef", b""]
    assert [r.headers["content-range"] for r in mock_transport.requests] == [
        "bytes 0-3/*",
        "bytes 4-5/*",
        "bytes */6",
    ]


def test_invite_member_sends_permissions(
    client: AeroFSClient, mock_transport: MockTransport
) -> None:
    mock_transport.add_response(
        status_code=httpx.codes.CREATED,
        json_data={
            "email": "bob@example.com",
            "invited_by": "alice@example.com",
            "permissions": ["WRITE"],
            "note": "welcome",
        },
    )

    pending = client.invite_member("sid1", "bob@example.com", [Permission.WRITE], "welcome")

    body = json.loads(mock_transport.requests[0].content)
    assert body == {"email": "bob@example.com", "permissions": ["WRITE"], "note": "welcome"}
    assert pending.invited_by == "alice@example.com"
    assert pending.permissions == frozenset({Permission.WRITE})
