"""
AeroFS client facade.

This is the main entry point for users of the library. It provides a clean,
high-level API over the file, folder, user and ACL endpoints.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, BinaryIO, Self

import httpx
import structlog

from aerofs.api.endpoints import files, folders, shares, users
from aerofs.api.http_client import HttpClient
from aerofs.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, Configuration
from aerofs.exceptions import InvalidArgumentError
from aerofs.models.files import ROOT_FOLDER_ID, Children, File, Folder, ParentPath
from aerofs.models.shares import Invitation, Member, PendingMember, Permission, SharedFolder
from aerofs.models.users import User
from aerofs.services.file_service import FileService

logger = structlog.get_logger(__name__)


def create_client(
    access_token: str | None,
    config: Configuration,
    *,
    transport: httpx.BaseTransport | None = None,
) -> "AeroFSClient":
    """
    Create a new AeroFS API client from a configuration.

    Args:
        access_token: OAuth access token, e.g. from
            AuthClient.exchange_authorization_code_for_access_token().
        config: Configuration to provision the client with.
        transport: Optional httpx transport for testing (mock transport).

    Returns:
        A new client.

    Raises:
        InvalidArgumentError: If the token is empty or the configuration is invalid.

    Example:
        ```python
        config = Configuration(host_name="https://share.aerofs.com", api_version="1.2")
        with create_client("00000000000000000000000000000000", config) as client:
            print(client.list_children())
        ```
    """
    if not access_token:
        msg = "access_token cannot be None or empty"
        raise InvalidArgumentError(msg)
    config.validate()
    return AeroFSClient(
        endpoint=config.endpoint,
        access_token=access_token,
        upload_chunk_size=config.upload_chunk_size,
        timeout=config.timeout,
        user_agent=config.user_agent,
        transport=transport,
    )


class AeroFSClient:
    """
    Synchronous client for the AeroFS API.

    Use create_client() rather than instantiating this directly; the
    constructor does not validate its arguments. Endpoint, token and chunk
    size are fixed for the lifetime of the client.

    Args:
        endpoint: API endpoint URL (host + "/api/v" + version).
        access_token: OAuth access token.
        upload_chunk_size: Bytes sent per upload request.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        transport: Optional httpx transport for testing.
    """

    def __init__(
        self,
        *,
        endpoint: str,
        access_token: str,
        upload_chunk_size: int,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._access_token = access_token
        self._upload_chunk_size = upload_chunk_size
        self._upload_buffer = bytearray(upload_chunk_size)

        self._http = HttpClient(
            endpoint,
            access_token=access_token,
            timeout=timeout,
            user_agent=user_agent,
            transport=transport,
        )
        self._file_service = FileService(self._http, self._upload_buffer)
        logger.debug("Client created", endpoint=endpoint, upload_chunk_size=upload_chunk_size)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release its connections."""
        self._http.close()
        logger.debug("Client closed")

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def access_token(self) -> str:
        return self._access_token

    @property
    def upload_chunk_size(self) -> int:
        return self._upload_chunk_size

    @property
    def upload_buffer(self) -> bytearray:
        """Buffer reused for every upload chunk; its length is upload_chunk_size."""
        return self._upload_buffer

    # Files

    def get_file(self, file_id: str, *, fields: Iterable[str] | None = None) -> File:
        """
        Get file metadata.

        Args:
            file_id: File ID.
            fields: Optional extra fields ("path", "content_state").

        Raises:
            NotFoundError: If the file does not exist.
        """
        return files.get_file(self._http, file_id, fields=fields)

    def get_file_path(self, file_id: str) -> ParentPath:
        return files.get_file_path(self._http, file_id)

    def create_file(self, parent_id: str, name: str) -> File:
        """
        Create an empty file.

        Raises:
            ConflictError: If an object with that name already exists.
        """
        return files.create_file(self._http, parent_id, name)

    def move_file(self, file_id: str, parent_id: str, name: str) -> File:
        return files.move_file(self._http, file_id, parent_id, name)

    def delete_file(self, file_id: str, *, if_match: str | None = None) -> None:
        files.delete_file(self._http, file_id, if_match=if_match)

    def iter_file_content(self, file_id: str, chunk_size: int | None = None) -> Iterator[bytes]:
        """
        Download a file as a stream.

        Example:
            ```python
            with open("report.pdf", "wb") as f:
                for chunk in client.iter_file_content(file_id):
                    f.write(chunk)
            ```
        """
        return self._file_service.iter_content(file_id, chunk_size)

    def download_file(self, file_id: str) -> bytes:
        """Download a file into memory."""
        return self._file_service.download(file_id)

    def download_to_file(self, file_id: str, destination: Path | str) -> None:
        """Download a file and save it to disk."""
        self._file_service.download_to_file(file_id, Path(destination))

    def upload_file_content(
        self, file_id: str, stream: BinaryIO, *, if_match: str | None = None
    ) -> str:
        """
        Replace the content of a file, in chunks of upload_chunk_size bytes.

        Args:
            file_id: File ID.
            stream: Binary stream to read from.
            if_match: Expected ETag of the current content.

        Returns:
            ETag of the new content.

        Raises:
            PreconditionFailedError: If if_match no longer matches.
        """
        return self._file_service.upload(file_id, stream, if_match=if_match)

    # Folders

    def get_folder(self, folder_id: str, *, fields: Iterable[str] | None = None) -> Folder:
        return folders.get_folder(self._http, folder_id, fields=fields)

    def get_folder_path(self, folder_id: str) -> ParentPath:
        return folders.get_folder_path(self._http, folder_id)

    def list_children(self, folder_id: str = ROOT_FOLDER_ID) -> Children:
        """List the content of a folder; the caller's root folder by default."""
        return folders.list_children(self._http, folder_id)

    def create_folder(self, parent_id: str, name: str) -> Folder:
        return folders.create_folder(self._http, parent_id, name)

    def move_folder(self, folder_id: str, parent_id: str, name: str) -> Folder:
        return folders.move_folder(self._http, folder_id, parent_id, name)

    def delete_folder(self, folder_id: str, *, if_match: str | None = None) -> None:
        folders.delete_folder(self._http, folder_id, if_match=if_match)

    def share_folder(self, folder_id: str) -> None:
        folders.share_folder(self._http, folder_id)

    # Users

    def get_user(self, email: str) -> User:
        return users.get_user(self._http, email)

    def create_user(self, email: str, first_name: str, last_name: str) -> User:
        return users.create_user(self._http, email, first_name, last_name)

    def update_user(self, email: str, first_name: str, last_name: str) -> User:
        return users.update_user(self._http, email, first_name, last_name)

    def delete_user(self, email: str) -> None:
        users.delete_user(self._http, email)

    def change_password(self, email: str, password: str) -> None:
        users.change_password(self._http, email, password)

    def disable_password(self, email: str) -> None:
        users.disable_password(self._http, email)

    # Shared folders

    def list_shared_folders(self, email: str) -> list[SharedFolder]:
        return shares.list_shared_folders(self._http, email)

    def get_shared_folder(self, sid: str) -> SharedFolder:
        return shares.get_shared_folder(self._http, sid)

    def create_shared_folder(self, name: str) -> SharedFolder:
        return shares.create_shared_folder(self._http, name)

    def list_members(self, sid: str) -> list[Member]:
        return shares.list_members(self._http, sid)

    def get_member(self, sid: str, email: str) -> Member:
        return shares.get_member(self._http, sid, email)

    def add_member(
        self, sid: str, email: str, permissions: Iterable[Permission] = ()
    ) -> Member:
        return shares.add_member(self._http, sid, email, permissions)

    def set_member_permissions(
        self, sid: str, email: str, permissions: Iterable[Permission]
    ) -> Member:
        return shares.set_member_permissions(self._http, sid, email, permissions)

    def remove_member(self, sid: str, email: str) -> None:
        shares.remove_member(self._http, sid, email)

    def list_pending_members(self, sid: str) -> list[PendingMember]:
        return shares.list_pending_members(self._http, sid)

    def get_pending_member(self, sid: str, email: str) -> PendingMember:
        return shares.get_pending_member(self._http, sid, email)

    def invite_member(
        self,
        sid: str,
        email: str,
        permissions: Iterable[Permission] = (),
        note: str = "",
    ) -> PendingMember:
        return shares.invite_member(self._http, sid, email, permissions, note)

    def revoke_invitation(self, sid: str, email: str) -> None:
        shares.revoke_invitation(self._http, sid, email)

    # Invitations

    def list_invitations(self, email: str) -> list[Invitation]:
        return shares.list_invitations(self._http, email)

    def get_invitation(self, email: str, sid: str) -> Invitation:
        return shares.get_invitation(self._http, email, sid)

    def accept_invitation(self, email: str, sid: str, *, external: bool = False) -> SharedFolder:
        return shares.accept_invitation(self._http, email, sid, external=external)

    def ignore_invitation(self, email: str, sid: str) -> None:
        shares.ignore_invitation(self._http, email, sid)
