from collections.abc import Iterator

import pytest

from aerofs.client import AeroFSClient, create_client
from aerofs.config import AppConfiguration, Configuration
from aerofs.tests.utils.mock_transport import MockTransport

HOST_NAME = "https://share.example.com"
ACCESS_TOKEN = "abc123"


@pytest.fixture
def config() -> Configuration:
    return Configuration(host_name=HOST_NAME, api_version="1.2")


@pytest.fixture
def app_config() -> AppConfiguration:
    return AppConfiguration(
        host_name=HOST_NAME,
        client_id="client-7f3a",
        client_secret="secret-9c2e",
        redirect_uri="https://app.example.com/callback",
    )


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def client(config: Configuration, mock_transport: MockTransport) -> Iterator[AeroFSClient]:
    with create_client(ACCESS_TOKEN, config, transport=mock_transport) as client:
        yield client
