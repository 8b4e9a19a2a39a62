"""API tests for user and credential endpoints"""


class TestCredentialEndpoints:

    def test_issue_sets_http_only_cookie(self, client, token_service):
        response = client.post("/jwt", json={"email": "alice@example.com", "name": "Alice"})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        header = response.headers["set-cookie"]
        assert "HttpOnly" in header
        assert "SameSite=strict" in header
        assert token_service.decode(response.cookies["token"])["email"] == "alice@example.com"

    def test_issue_requires_email(self, client):
        response = client.post("/jwt", json={"name": "Alice"})

        assert response.status_code == 422
        assert response.json()["error"] == "Validation error"

    def test_logout_clears_cookie(self, client):
        client.post("/jwt", json={"email": "alice@example.com"})

        response = client.post("/logout")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert "Max-Age=0" in response.headers["set-cookie"]


class TestCreateUserEndpoint:

    def test_create_then_duplicate(self, client, users_collection):
        first = client.post("/user", json={"email": "alice@example.com", "name": "Alice"})
        second = client.post("/user", json={"email": "alice@example.com", "name": "Alice"})

        assert first.status_code == 200
        assert first.json()["message"] == "User saved successfully"
        assert first.json()["result"]["acknowledged"] is True
        assert second.json() == {"message": "User already exists"}
        assert len([doc for doc in users_collection.docs if doc["email"] == "alice@example.com"]) == 1


class TestUserRoleEndpoint:

    def test_unknown_user_is_guest(self, client):
        response = client.get("/user/none@x.com")

        assert response.status_code == 404
        assert response.json() == {"role": "guest"}

    def test_known_user_role(self, client, users_collection):
        users_collection.docs.append({"email": "admin@example.com", "role": "admin"})

        response = client.get("/user/admin@example.com")

        assert response.status_code == 200
        assert response.json() == {"role": "admin"}

    def test_user_without_role_gets_empty_body(self, client, users_collection):
        users_collection.docs.append({"email": "bob@example.com"})

        response = client.get("/user/bob@example.com")

        assert response.status_code == 200
        assert response.json() == {}


class TestListUsersEndpoint:

    def test_requires_credential(self, client):
        response = client.get("/users")

        assert response.status_code == 401

    def test_admin_lists_users(self, client, admin_cookie):
        client.post("/user", json={"email": "alice@example.com"})
        client.cookies.set("token", admin_cookie)

        response = client.get("/users")

        assert response.status_code == 200
        emails = sorted(user["email"] for user in response.json())
        assert emails == ["admin@example.com", "alice@example.com"]
