"""
File content service for AeroFS.

Handles streaming downloads and chunked uploads.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

import structlog

from aerofs.api.endpoints.files import stream_file_content, upload_chunk
from aerofs.api.http_client import HttpClient
from aerofs.exceptions import APIError

logger = structlog.get_logger(__name__)


class FileService:
    """
    Service for transferring file content.

    Uploads are read chunk by chunk into a single buffer owned by the
    service's client, so one FileService must not upload from two threads
    at once.
    """

    def __init__(self, http: HttpClient, upload_buffer: bytearray) -> None:
        """
        Args:
            http: HTTP client bound to the API endpoint.
            upload_buffer: Reused for every chunk; its length is the chunk size.
        """
        self._http = http
        self._buffer = upload_buffer

    def iter_content(self, file_id: str, chunk_size: int | None = None) -> Iterator[bytes]:
        """
        Download a file as a stream.

        Args:
            file_id: File ID.
            chunk_size: Size of yielded chunks; httpx default when None.

        Yields:
            File content in chunks.
        """
        logger.debug("Downloading file", file_id=file_id)
        yield from stream_file_content(self._http, file_id, chunk_size=chunk_size)

    def download(self, file_id: str) -> bytes:
        """Download the whole content of a file into memory."""
        return b"".join(self.iter_content(file_id))

    def download_to_file(self, file_id: str, destination: Path) -> None:
        """
        Download a file and save to disk.

        Args:
            file_id: File ID.
            destination: Local file path to save to.
        """
        destination.parent.mkdir(parents=True, exist_ok=True)

        with destination.open("wb") as f:
            for chunk in self.iter_content(file_id):
                f.write(chunk)

        logger.info("File saved", file_id=file_id, destination=str(destination))

    def upload(self, file_id: str, stream: BinaryIO, *, if_match: str | None = None) -> str:
        """
        Upload new content for a file.

        Every non-empty chunk is sent as "bytes start-end/*"; the Upload-ID
        returned by the appliance ties the chunks together and a final empty
        request with "bytes */total" commits the content.

        Args:
            file_id: File ID.
            stream: Binary stream to read the content from.
            if_match: Expected ETag of the current content.

        Returns:
            ETag of the new content.

        Raises:
            PreconditionFailedError: If if_match no longer matches.
            APIError: If the appliance rejects a chunk or returns no ETag.
        """
        view = memoryview(self._buffer)
        upload_id: str | None = None
        offset = 0

        while (read := _read_chunk(stream, view)) > 0:
            response = upload_chunk(
                self._http,
                file_id,
                view[:read].tobytes(),
                content_range=f"bytes {offset}-{offset + read - 1}/*",
                upload_id=upload_id,
                if_match=if_match,
            )
            upload_id = response.headers.get("Upload-ID", upload_id)
            offset += read
            logger.debug("Chunk uploaded", file_id=file_id, offset=offset)

        response = upload_chunk(
            self._http,
            file_id,
            b"",
            content_range=f"bytes */{offset}",
            upload_id=upload_id,
            if_match=if_match,
        )
        etag = response.headers.get("ETag")
        if etag is None:
            msg = "Upload response does not contain an ETag"
            raise APIError(msg, code=response.status_code, endpoint=f"/files/{file_id}/content")

        logger.info("File uploaded", file_id=file_id, size=offset)
        return etag


def _read_chunk(stream: BinaryIO, view: memoryview) -> int:
    """Fill the buffer from the stream, stopping early only at end of stream."""
    filled = 0
    while filled < len(view):
        read = stream.readinto(view[filled:])
        if not read:
            break
        filled += read
    return filled
