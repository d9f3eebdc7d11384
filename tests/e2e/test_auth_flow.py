"""End-to-end tests for the email session flow."""

from tests.conftest import login


class TestAuthFlow:
    """Login, session resolution and logout over HTTP."""

    def test_login_sets_session_cookie(self, client):
        response = client.post("/auth/login", json={"email": "alice@example.com"})

        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["profile"]["email"] == "alice@example.com"
        assert data["profile"]["username"] == "alice"
        assert "token" not in data
        assert "auth_token" in response.cookies
        assert "httponly" in response.headers["set-cookie"].lower()

    def test_me_without_session_is_unauthenticated(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "profile": None}

    def test_me_with_session_returns_profile(self, client):
        profile = login(client, "alice@example.com")

        response = client.get("/auth/me")

        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["profile"]["id"] == profile["id"]

    def test_tampered_cookie_is_unauthenticated(self, client):
        client.cookies.set("auth_token", "not-a-token")

        response = client.get("/auth/me")

        assert response.json()["authenticated"] is False

    def test_logout_clears_session(self, client):
        login(client, "alice@example.com")

        response = client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_register_twice_yields_one_profile(self, client):
        first = client.post(
            "/auth/register", json={"email": "bob@example.com", "username": "Bobby"}
        )
        second = client.post(
            "/auth/register", json={"email": "bob@example.com", "username": "Robert"}
        )

        assert first.status_code == 200
        assert second.status_code == 200
        assert first.json()["profile"]["id"] == second.json()["profile"]["id"]
        assert second.json()["profile"]["username"] == "Bobby"

    def test_malformed_email_is_rejected(self, client):
        response = client.post("/auth/login", json={"email": "nope"})

        assert response.status_code == 422

    def test_overlong_username_is_rejected(self, client):
        response = client.post(
            "/auth/login", json={"email": "a@example.com", "username": "x" * 300}
        )

        assert response.status_code == 422
        assert "auth_token" not in response.cookies

    def test_overlong_email_is_rejected(self, client):
        response = client.post(
            "/auth/login", json={"email": "y" * 300 + "@example.com"}
        )

        assert response.status_code == 422

    def test_overlong_register_email_is_rejected(self, client):
        response = client.post(
            "/auth/register",
            json={"email": "y" * 300 + "@example.com", "username": "yves"},
        )

        assert response.status_code == 422

    def test_profile_page_and_avatar_update(self, client):
        profile = login(client, "alice@example.com")

        updated = client.patch(
            "/profiles/me", json={"avatar_url": "https://example.com/alice.png"}
        )
        public = client.get(f"/profiles/{profile['id']}")

        assert updated.status_code == 200
        assert public.status_code == 200
        assert public.json()["avatar_url"] == "https://example.com/alice.png"

    def test_avatar_update_requires_session(self, client):
        response = client.patch("/profiles/me", json={"avatar_url": None})

        assert response.status_code == 401
