from unittest.mock import Mock

from aerofs.api.endpoints.users import (
    change_password,
    create_user,
    delete_user,
    disable_password,
    get_user,
    update_user,
)
from aerofs.models.shares import Permission

EMAIL = "alice@example.com"


def test_get_user_parses_shares_and_invitations(mock_http: Mock) -> None:
    mock_http.request_json = Mock(
        return_value={
            "email": EMAIL,
            "first_name": "Alice",
            "last_name": "Liddell",
            "shares": [{"id": "sid1", "name": "Team"}],
            "invitations": [
                {
                    "share_id": "sid2",
                    "share_name": "Board",
                    "invited_by": "bob@example.com",
                    "permissions": ["WRITE"],
                }
            ],
        }
    )

    user = get_user(mock_http, EMAIL)

    mock_http.request_json.assert_called_once_with("GET", f"/users/{EMAIL}")
    assert user.full_name == "Alice Liddell"
    assert [s.sid for s in user.shares] == ["sid1"]
    assert user.invitations[0].share_name == "Board"
    assert user.invitations[0].permissions == frozenset({Permission.WRITE})


def test_get_user_without_optional_fields(mock_http: Mock) -> None:
    mock_http.request_json = Mock(return_value={"email": EMAIL})

    user = get_user(mock_http, EMAIL)

    assert user.shares == ()
    assert user.invitations == ()
    assert user.full_name == ""


def test_create_user_sends_names(mock_http: Mock) -> None:
    mock_http.request_json = Mock(return_value={"email": EMAIL})

    create_user(mock_http, EMAIL, "Alice", "Liddell")

    mock_http.request_json.assert_called_once_with(
        "POST",
        "/users",
        json={"email": EMAIL, "first_name": "Alice", "last_name": "Liddell"},
    )


def test_update_user_sends_names(mock_http: Mock) -> None:
    mock_http.request_json = Mock(return_value={"email": EMAIL, "first_name": "Al"})

    user = update_user(mock_http, EMAIL, "Al", "Liddell")

    mock_http.request_json.assert_called_once_with(
        "PUT", f"/users/{EMAIL}", json={"first_name": "Al", "last_name": "Liddell"}
    )
    assert user.first_name == "Al"


def test_delete_user(mock_http: Mock) -> None:
    delete_user(mock_http, EMAIL)

    mock_http.request.assert_called_once_with("DELETE", f"/users/{EMAIL}")


def test_change_password_sends_json_string(mock_http: Mock) -> None:
    change_password(mock_http, EMAIL, "s3cret!")

    mock_http.request.assert_called_once_with("PUT", f"/users/{EMAIL}/password", json="s3cret!")


def test_disable_password(mock_http: Mock) -> None:
    disable_password(mock_http, EMAIL)

    mock_http.request.assert_called_once_with("DELETE", f"/users/{EMAIL}/password")
