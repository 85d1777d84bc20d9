"""
Authorization service for AeroFS.

Builds OAuth2 authorization URLs and performs the authorization-code exchange.
"""

from collections.abc import Sequence
from typing import Any, Self
from urllib.parse import urlencode

import httpx
import structlog

from aerofs.api.endpoints.oauth import exchange_code
from aerofs.api.http_client import HttpClient
from aerofs.config import TOKEN_PATH, AppConfiguration
from aerofs.exceptions import InvalidArgumentError
from aerofs.models.auth import OAuthScope, TokenResponse

logger = structlog.get_logger(__name__)

SCOPE_SEPARATOR = ","


class AuthClient:
    """
    OAuth2 client for an application registered with an AeroFS appliance.

    Implements AuthAPI. Only the token exchange touches the network.

    Example:
        ```python
        with create_auth_client(app_config) as auth:
            url = auth.generate_authorization_url([OAuthScope.FILES_READ, OAuthScope.USER_READ])
            # ... user approves, appliance redirects with ?code=...
            token = auth.exchange_authorization_code_for_access_token(code)
        ```
    """

    def __init__(
        self,
        config: AppConfiguration,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Application configuration; not validated here, see create_auth_client().
            transport: Optional httpx transport for testing.
        """
        self._config = config
        self._http = HttpClient(
            config.host_name,
            timeout=config.timeout,
            transport=transport,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def generate_authorization_url(self, scopes: OAuthScope | Sequence[OAuthScope]) -> str:
        """
        Generate the URL to send the user to for the authorization flow.

        Scopes keep the caller's order and are not deduplicated.

        Args:
            scopes: A single requested scope, or the requested scopes in order.

        Returns:
            Authorization URL.

        Raises:
            InvalidArgumentError: If no scope is requested.
        """
        if isinstance(scopes, OAuthScope):
            scopes = [scopes]
        if len(scopes) == 0:
            msg = "At least one scope is required"
            raise InvalidArgumentError(msg)

        query = urlencode(
            {
                "response_type": "code",
                "client_id": self._config.client_id,
                "redirect_uri": self._config.redirect_uri,
                "scope": SCOPE_SEPARATOR.join(OAuthScope(s).value for s in scopes),
            }
        )
        return f"{self._config.authorization_url}?{query}"

    def exchange_authorization_code(self, code: str) -> TokenResponse:
        """
        Exchange an authorization code for the full token response.

        Raises:
            InvalidArgumentError: If the code is empty.
            APIError: If the token endpoint rejects the exchange.
            NetworkError: If the request fails.
        """
        if not code:
            msg = "code cannot be None or empty"
            raise InvalidArgumentError(msg)

        logger.debug("Exchanging authorization code", client_id=self._config.client_id)
        token = exchange_code(
            self._http,
            TOKEN_PATH,
            code=code,
            client_id=self._config.client_id,
            client_secret=self._config.client_secret,
            redirect_uri=self._config.redirect_uri,
        )
        logger.info("Authorization code exchanged", scopes=sorted(token.scopes))
        return token

    def exchange_authorization_code_for_access_token(self, code: str) -> str:
        """
        Exchange an OAuth2 authorization code for an access token.

        Returns:
            The new access token, usable with create_client().
        """
        return self.exchange_authorization_code(code).access_token


def create_auth_client(
    config: AppConfiguration,
    *,
    transport: httpx.BaseTransport | None = None,
) -> AuthClient:
    """
    Create an authorization client from a validated application configuration.

    Raises:
        InvalidArgumentError: If the configuration is invalid.
    """
    config.validate()
    return AuthClient(config, transport=transport)
