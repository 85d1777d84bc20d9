import io
import os
import uuid
from collections.abc import Iterator

import pytest

from aerofs.client import AeroFSClient, create_client
from aerofs.config import Configuration
from aerofs.exceptions import NotFoundError


@pytest.fixture(scope="module")
def live_client(aerofs_credentials: tuple[str, str]) -> Iterator[AeroFSClient]:
    host, token = aerofs_credentials
    config = Configuration(
        host_name=host,
        api_version=os.getenv("AEROFS_TEST_API_VERSION", "1.2"),
        upload_chunk_size=1024,
    )
    with create_client(token, config) as client:
        yield client


@pytest.mark.integration
def test_list_root_children(live_client: AeroFSClient) -> None:
    children = live_client.list_children()

    assert children.parent_id


@pytest.mark.integration
def test_missing_file_raises_not_found(live_client: AeroFSClient) -> None:
    with pytest.raises(NotFoundError):
        live_client.get_file("0" * 64)


@pytest.mark.integration
def test_upload_download_and_delete(live_client: AeroFSClient) -> None:
    folder = live_client.create_folder("root", f"sdk-test-{uuid.uuid4().hex[:8]}")
    try:
        file = live_client.create_file(folder.folder_id, "data.bin")
        content = os.urandom(3000)

        etag = live_client.upload_file_content(file.file_id, io.BytesIO(content))

        assert etag
        assert live_client.download_file(file.file_id) == content
    finally:
        live_client.delete_folder(folder.folder_id)
