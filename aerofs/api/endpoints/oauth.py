"""OAuth2 token endpoint."""

from aerofs.api.http_client import HttpClient
from aerofs.exceptions import APIError
from aerofs.models.auth import TokenResponse


def exchange_code(
    http: HttpClient,
    token_path: str,
    *,
    code: str,
    client_id: str,
    client_secret: str,
    redirect_uri: str,
) -> TokenResponse:
    """
    Exchange an authorization code using the authorization-code grant.

    Args:
        http: HTTP client whose base URL is the appliance host.
        token_path: Path of the token endpoint (e.g., "/auth/token").
        code: Authorization code received on the redirect URI.
        client_id: OAuth client ID.
        client_secret: OAuth client secret.
        redirect_uri: Redirect URI used in the authorization request.

    Returns:
        The token response.

    Raises:
        APIError: If the exchange is rejected or the response lacks an access token.
        NetworkError: If the request fails.
    """
    response = http.request_json(
        "POST",
        token_path,
        data={
            "grant_type": "authorization_code",
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": redirect_uri,
        },
        authenticated=False,
    )

    if not isinstance(response, dict) or not response.get("access_token"):
        msg = "Token response does not contain an access token"
        raise APIError(msg, code=200, endpoint=token_path)

    scope = response.get("scope") or ""
    return TokenResponse(
        access_token=response["access_token"],
        token_type=response.get("token_type", "bearer"),
        expires_in=int(response.get("expires_in") or 0),
        scopes=frozenset(s for s in scope.replace(",", " ").split() if s),
    )
