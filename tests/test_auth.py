import uuid

from fastapi import status

from bookstore.core.security import create_access_token


class TestRegister:
    """Test POST /auth/register."""

    def test_register_success(self, test_client, user_credentials):
        response = test_client.post("/auth/register", json=user_credentials)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["success"] is True
        assert body["data"]["username"] == user_credentials["username"]
        assert body["data"]["email"] == user_credentials["email"]
        assert "password" not in body["data"]
        assert "passwordHash" not in body["data"]

    def test_register_duplicate_username(self, test_client, registered_user, user_credentials):
        payload = dict(user_credentials, email="someone-else@example.com")
        response = test_client.post("/auth/register", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Username or email already exists"

    def test_register_duplicate_email(self, test_client, registered_user, user_credentials):
        payload = dict(user_credentials, username="someone_else")
        response = test_client.post("/auth/register", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["type"] == "conflict"

    def test_register_missing_fields(self, test_client):
        response = test_client.post("/auth/register", json={"username": "nobody"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["type"] == "invalid_input"

    def test_register_invalid_email(self, test_client, user_credentials):
        payload = dict(user_credentials, email="not-an-email")
        response = test_client.post("/auth/register", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestLogin:
    """Test POST /auth/login."""

    def test_login_with_username(self, test_client, registered_user, user_credentials):
        response = test_client.post(
            "/auth/login",
            json={"username": user_credentials["username"], "password": user_credentials["password"]},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["token"]
        assert data["user"]["id"] == registered_user["id"]

    def test_login_with_email(self, test_client, registered_user, user_credentials):
        response = test_client.post(
            "/auth/login",
            json={"email": user_credentials["email"], "password": user_credentials["password"]},
        )

        assert response.status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, test_client, registered_user, user_credentials):
        response = test_client.post(
            "/auth/login",
            json={"username": user_credentials["username"], "password": "wrong"},
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"]["type"] == "invalid_credentials"
        assert response.json()["message"] == "Invalid credentials"

    def test_login_unknown_user(self, test_client):
        response = test_client.post("/auth/login", json={"username": "ghost", "password": "x"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_without_identifier(self, test_client):
        response = test_client.post("/auth/login", json={"password": "x"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_login_token_works_for_protected_routes(self, test_client, registered_user, user_credentials):
        token = test_client.post(
            "/auth/login",
            json={"username": user_credentials["username"], "password": user_credentials["password"]},
        ).json()["data"]["token"]

        response = test_client.post(
            "/genre", json={"name": "Logged In"}, headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == status.HTTP_201_CREATED


class TestMe:
    """Test GET /auth/me."""

    def test_me(self, test_client, registered_user, auth_headers):
        response = test_client.get("/auth/me", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == registered_user["id"]
        assert "createdAt" in data

    def test_me_without_token(self, test_client):
        response = test_client.get("/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_with_expired_token(self, test_client, registered_user):
        token = create_access_token(
            uuid.UUID(registered_user["id"]),
            registered_user["username"],
            registered_user["email"],
            expires_delta=-10,
        )

        response = test_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "Invalid or expired token"

    def test_me_with_wrong_scheme(self, test_client, auth_token):
        response = test_client.get("/auth/me", headers={"Authorization": f"Basic {auth_token}"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_me_for_unknown_user(self, test_client):
        token = create_access_token(uuid.uuid4(), "ghost", "ghost@example.com")

        response = test_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
