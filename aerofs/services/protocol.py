"""
Authorization API protocol definition.

Any object offering these operations can drive the OAuth2 flow, so
applications can swap in their own implementation (e.g. a stub in tests).
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from aerofs.models.auth import OAuthScope


@runtime_checkable
class AuthAPI(Protocol):
    """The AeroFS authorization API."""

    def generate_authorization_url(self, scopes: OAuthScope | Sequence[OAuthScope]) -> str:
        """
        Generate the URL to send the user to for the authorization flow.

        Args:
            scopes: A single requested scope, or the requested scopes in order.

        Returns:
            Authorization URL.

        Raises:
            InvalidArgumentError: If no scope is requested.
        """
        ...

    def exchange_authorization_code_for_access_token(self, code: str) -> str:
        """
        Exchange an OAuth2 authorization code for an access token.

        Args:
            code: Authorization code received on the redirect URI.

        Returns:
            The new access token, usable with create_client().

        Raises:
            InvalidArgumentError: If the code is empty.
            APIError: If the token endpoint rejects the exchange.
            NetworkError: If the request fails.
        """
        ...
