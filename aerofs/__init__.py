"""
AeroFS Python SDK.

A typed, synchronous Python client for the AeroFS appliance REST API.

Example:
    ```python
    from aerofs import AppConfiguration, Configuration, OAuthScope, create_auth_client, create_client

    app = AppConfiguration(
        host_name="https://share.aerofs.com",
        client_id="my-client-id",
        client_secret="my-client-secret",
        redirect_uri="https://example.com/callback",
    )
    with create_auth_client(app) as auth:
        print(auth.generate_authorization_url([OAuthScope.FILES_READ, OAuthScope.FILES_WRITE]))
        token = auth.exchange_authorization_code_for_access_token(input("code: "))

    config = Configuration(host_name="https://share.aerofs.com", api_version="1.2")
    with create_client(token, config) as client:
        for folder in client.list_children().folders:
            print(folder.name)
    ```
"""

from aerofs.client import AeroFSClient, create_client
from aerofs.config import DEFAULT_CHUNK_SIZE, AppConfiguration, Configuration
from aerofs.exceptions import (
    AeroFSError,
    APIError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PreconditionFailedError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)
from aerofs.models.auth import OAuthScope, TokenResponse
from aerofs.models.files import Children, ContentState, File, Folder, ParentPath
from aerofs.models.shares import Invitation, Member, PendingMember, Permission, SharedFolder
from aerofs.models.users import User
from aerofs.services.auth_service import AuthClient, create_auth_client
from aerofs.services.protocol import AuthAPI

__version__ = "0.1.0"

__all__ = [
    # Main client
    "AeroFSClient",
    "create_client",
    "Configuration",
    "DEFAULT_CHUNK_SIZE",
    # Authorization
    "AuthAPI",
    "AuthClient",
    "AppConfiguration",
    "create_auth_client",
    "OAuthScope",
    "TokenResponse",
    # Models
    "File",
    "Folder",
    "ParentPath",
    "Children",
    "ContentState",
    "User",
    "Permission",
    "SharedFolder",
    "Member",
    "PendingMember",
    "Invitation",
    # Exceptions
    "AeroFSError",
    "InvalidArgumentError",
    "APIError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "PreconditionFailedError",
    "RateLimitError",
    "ServerError",
    "NetworkError",
]
