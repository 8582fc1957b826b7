"""
Test suite for user endpoints.

Tests cover:
- Admin-only user creation and listing
- Self-or-admin access to a single user
- Authorization is decided before existence
- Applying to jobs
"""

from app.core.security import create_access_token


def headers_for(username, is_admin=False):
    """Helper to build bearer headers for any username"""
    return {"Authorization": f"Bearer {create_access_token(username, is_admin)}"}


class TestUserCreation:
    """Tests for POST /users"""

    new_user = {
        "username": "u-new",
        "firstName": "First-new",
        "lastName": "Last-new",
        "password": "password-new",
        "email": "new@example.com",
        "isAdmin": False,
    }

    def test_create_as_admin(self, client, seed, admin_headers):
        response = client.post("/users", json=self.new_user, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["user"] == {
            "username": "u-new",
            "firstName": "First-new",
            "lastName": "Last-new",
            "email": "new@example.com",
            "isAdmin": False,
        }
        assert isinstance(data["token"], str)

    def test_create_admin_as_admin(self, client, seed, admin_headers):
        response = client.post("/users", json=dict(self.new_user, isAdmin=True), headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["user"]["isAdmin"] is True

    def test_create_as_plain_user(self, client, seed, u1_headers):
        response = client.post("/users", json=self.new_user, headers=u1_headers)
        assert response.status_code == 401

    def test_create_invalid_body_as_plain_user(self, client, seed, u1_headers):
        response = client.post("/users", json={"username": "u-new"}, headers=u1_headers)
        assert response.status_code == 400

    def test_create_invalid_email(self, client, seed, admin_headers):
        response = client.post("/users", json=dict(self.new_user, email="not-an-email"), headers=admin_headers)
        assert response.status_code == 400

    def test_create_duplicate(self, client, seed, admin_headers):
        response = client.post("/users", json=dict(self.new_user, username="u1"), headers=admin_headers)
        assert response.status_code == 400


class TestUserListing:
    """Tests for GET /users"""

    def test_list_as_admin(self, client, seed, admin_headers):
        response = client.get("/users", headers=admin_headers)

        assert response.status_code == 200
        assert [u["username"] for u in response.json()["users"]] == ["admin", "u1"]
        assert "password" not in response.json()["users"][0]
        assert "hashedPassword" not in response.json()["users"][0]

    def test_list_as_plain_user(self, client, seed, u1_headers):
        response = client.get("/users", headers=u1_headers)
        assert response.status_code == 401

    def test_list_anonymous(self, client, seed):
        response = client.get("/users")
        assert response.status_code == 401


class TestUserRetrieval:
    """Tests for GET /users/{username}"""

    def test_get_self(self, client, seed, u1_headers):
        response = client.get("/users/u1", headers=u1_headers)

        assert response.status_code == 200
        assert response.json() == {
            "user": {
                "username": "u1",
                "firstName": "U1F",
                "lastName": "U1L",
                "email": "u1@example.com",
                "isAdmin": False,
                "jobs": [],
            }
        }

    def test_get_as_admin(self, client, seed, admin_headers):
        response = client.get("/users/u1", headers=admin_headers)
        assert response.status_code == 200

    def test_get_other_user(self, client, seed):
        response = client.get("/users/u1", headers=headers_for("someone-else"))
        assert response.status_code == 401

    def test_get_nonexistent_as_admin(self, client, seed, admin_headers):
        response = client.get("/users/nope", headers=admin_headers)
        assert response.status_code == 404

    def test_get_nonexistent_as_plain_user(self, client, seed, u1_headers):
        """A plain user cannot learn whether another username exists"""
        response = client.get("/users/nope", headers=u1_headers)
        assert response.status_code == 401

    def test_get_anonymous(self, client, seed):
        response = client.get("/users/u1")
        assert response.status_code == 401


class TestUserUpdate:
    """Tests for PATCH /users/{username}"""

    def test_update_self(self, client, seed, u1_headers):
        response = client.patch("/users/u1", json={"firstName": "New"}, headers=u1_headers)

        assert response.status_code == 200
        assert response.json()["user"]["firstName"] == "New"
        assert response.json()["user"]["lastName"] == "U1L"

    def test_update_as_admin(self, client, seed, admin_headers):
        response = client.patch("/users/u1", json={"lastName": "New"}, headers=admin_headers)
        assert response.status_code == 200

    def test_update_other_user(self, client, seed):
        response = client.patch("/users/u1", json={"firstName": "New"}, headers=headers_for("someone-else"))
        assert response.status_code == 401

    def test_update_password(self, client, seed, u1_headers):
        response = client.patch("/users/u1", json={"password": "brand-new"}, headers=u1_headers)
        assert response.status_code == 200

        login = client.post("/auth/token", json={"username": "u1", "password": "brand-new"})
        assert login.status_code == 200

    def test_cannot_grant_self_admin(self, client, seed, u1_headers):
        response = client.patch("/users/u1", json={"isAdmin": True}, headers=u1_headers)
        assert response.status_code == 400

    def test_update_empty_body(self, client, seed, u1_headers):
        response = client.patch("/users/u1", json={}, headers=u1_headers)
        assert response.status_code == 400

    def test_update_nonexistent_as_admin(self, client, seed, admin_headers):
        response = client.patch("/users/nope", json={"firstName": "x"}, headers=admin_headers)
        assert response.status_code == 404

    def test_invalid_body_from_other_user(self, client, seed):
        """The body is validated before the caller is checked"""
        response = client.patch("/users/u1", json={"email": "not-an-email"}, headers=headers_for("someone-else"))

        assert response.status_code == 400
        assert response.json()["detail"][0].startswith("email")


class TestUserDeletion:
    """Tests for DELETE /users/{username}"""

    def test_delete_self(self, client, seed, u1_headers, admin_headers):
        response = client.delete("/users/u1", headers=u1_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "u1"}
        assert client.get("/users/u1", headers=admin_headers).status_code == 404

    def test_delete_other_user(self, client, seed):
        response = client.delete("/users/u1", headers=headers_for("someone-else"))
        assert response.status_code == 401

    def test_delete_nonexistent_as_admin(self, client, seed, admin_headers):
        response = client.delete("/users/nope", headers=admin_headers)
        assert response.status_code == 404


class TestApplyToJob:
    """Tests for POST /users/{username}/jobs/{job_id}"""

    def test_apply_self(self, client, seed, u1_headers):
        response = client.post(f"/users/u1/jobs/{seed['j1']}", headers=u1_headers)

        assert response.status_code == 201
        assert response.json() == {"applied": seed["j1"]}
        assert client.get("/users/u1", headers=u1_headers).json()["user"]["jobs"] == [seed["j1"]]

    def test_apply_as_admin(self, client, seed, admin_headers):
        response = client.post(f"/users/u1/jobs/{seed['j2']}", headers=admin_headers)
        assert response.status_code == 201

    def test_apply_for_other_user(self, client, seed):
        response = client.post(f"/users/u1/jobs/{seed['j1']}", headers=headers_for("someone-else"))
        assert response.status_code == 401

    def test_apply_twice(self, client, seed, u1_headers):
        client.post(f"/users/u1/jobs/{seed['j1']}", headers=u1_headers)
        response = client.post(f"/users/u1/jobs/{seed['j1']}", headers=u1_headers)

        assert response.status_code == 400
        assert "already applied" in response.json()["detail"]

    def test_apply_nonexistent_job(self, client, seed, u1_headers):
        response = client.post("/users/u1/jobs/99999", headers=u1_headers)
        assert response.status_code == 404

    def test_apply_non_integer_job_id(self, client, seed, u1_headers):
        response = client.post("/users/u1/jobs/abc", headers=u1_headers)
        assert response.status_code == 400
