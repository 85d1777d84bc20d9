"""
Business logic services for AeroFS.
"""

from aerofs.services.auth_service import AuthClient, create_auth_client
from aerofs.services.file_service import FileService
from aerofs.services.protocol import AuthAPI

__all__ = [
    "AuthAPI",
    "AuthClient",
    "FileService",
    "create_auth_client",
]
