"""
AeroFS client configuration.
"""

from dataclasses import dataclass

from aerofs.exceptions import InvalidArgumentError

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "AeroFS-Python/0.1.0"
AUTHORIZATION_PATH = "/authorize"
TOKEN_PATH = "/auth/token"


@dataclass(kw_only=True)
class Configuration:
    """
    Attributes:
        host_name: Base URL of the target AeroFS appliance (e.g. "https://share.aerofs.com").
        api_version: Version of the API to use (e.g. "1.2").
        upload_chunk_size: Maximum number of bytes sent per upload request.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
    """

    host_name: str = ""
    api_version: str = ""
    upload_chunk_size: int = DEFAULT_CHUNK_SIZE
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def endpoint(self) -> str:
        """URL of the API endpoint, built from host_name and api_version."""
        return (self.host_name or "") + "/api/v" + (self.api_version or "")

    def validate(self) -> None:
        """
        Validate the values in this configuration.

        Raises:
            InvalidArgumentError: If any value is invalid.
        """
        if not self.endpoint:
            msg = "endpoint cannot be empty"
            raise InvalidArgumentError(msg)
        if not (self.host_name or "").strip():
            msg = "host_name cannot be empty"
            raise InvalidArgumentError(msg, endpoint=self.endpoint)
        if not (self.api_version or "").strip():
            msg = "api_version cannot be empty"
            raise InvalidArgumentError(msg, endpoint=self.endpoint)
        if self.upload_chunk_size <= 0:
            msg = "upload_chunk_size must be greater than 0"
            raise InvalidArgumentError(msg, upload_chunk_size=self.upload_chunk_size)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise InvalidArgumentError(msg, timeout=self.timeout)


@dataclass(kw_only=True)
class AppConfiguration:
    """
    OAuth client application registered with the appliance.

    Attributes:
        host_name: Base URL of the target AeroFS appliance.
        client_id: OAuth client ID.
        client_secret: OAuth client secret.
        redirect_uri: Redirect URI registered for the client.
        timeout: Request timeout in seconds for the token exchange.
    """

    host_name: str = ""
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @property
    def authorization_url(self) -> str:
        return (self.host_name or "") + AUTHORIZATION_PATH

    @property
    def token_url(self) -> str:
        return (self.host_name or "") + TOKEN_PATH

    def validate(self) -> None:
        """
        Raises:
            InvalidArgumentError: If any value is blank or the timeout is not positive.
        """
        for name in ("host_name", "client_id", "client_secret", "redirect_uri"):
            if not (getattr(self, name) or "").strip():
                msg = f"{name} cannot be empty"
                raise InvalidArgumentError(msg)
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise InvalidArgumentError(msg, timeout=self.timeout)
