"""End-to-end tests for the password authentication flow."""

from tests.harness import create_client_fixture

client = create_client_fixture()


def _register(client, username="alice", email="alice@example.com", password="secret123"):
    return client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )


class TestAuthFlow:
    """End-to-end tests for register, login and the current user."""

    def test_register_login_and_me(self, client):
        """A registered user can log in and read their profile."""
        # Act
        registered = _register(client)
        login = client.post(
            "/api/auth/login",
            json={"email": "alice@example.com", "password": "secret123"},
        )
        token = login.json()["token"]
        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

        # Assert
        assert registered.status_code == 201
        assert registered.json()["user"]["username"] == "alice"
        assert login.status_code == 200
        assert me.status_code == 200
        data = me.json()
        assert data["id"] == registered.json()["user"]["id"]
        assert data["email"] == "alice@example.com"
        assert data["reputation"] == 0
        assert "password_hash" not in data

    def test_duplicate_registration_is_conflict(self, client):
        """Taken usernames get a 409."""
        # Arrange
        _register(client)

        # Act
        response = _register(client, email="other@example.com")

        # Assert
        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    def test_short_password_is_bad_request(self, client):
        """Validation failures use the common error body."""
        # Act
        response = _register(client, password="123")

        # Assert
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["request_id"] == response.headers["X-Request-ID"]

    def test_wrong_password_is_unauthorized(self, client):
        """Bad credentials get a 401."""
        # Arrange
        _register(client)

        # Act
        response = client.post(
            "/api/auth/login",
            json={"email": "alice@example.com", "password": "wrong-password"},
        )

        # Assert
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_me_without_token_is_unauthorized(self, client):
        """The profile endpoint requires a bearer token."""
        response = client.get("/api/auth/me")

        assert response.status_code == 401

    def test_me_with_garbage_token_is_unauthorized(self, client):
        """Invalid tokens are rejected, not crashed on."""
        response = client.get(
            "/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "unauthorized"
