"""
Tests for admin login and shop settings.
"""

from datetime import timedelta

from barbershop.security_utils import create_jwt_token, verify_jwt_token


class TestAdminLogin:
    def test_login_success(self, client):
        response = client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
        assert response.status_code == 200

        body = response.json()
        assert body["success"] is True
        assert body["admin"]["username"] == "admin"
        claims = verify_jwt_token(body["token"])
        assert claims["username"] == "admin"
        assert claims["id"] == body["admin"]["id"]

    def test_login_wrong_password(self, client):
        response = client.post("/api/admin/login", json={"username": "admin", "password": "wrong"})
        assert response.status_code == 401

    def test_login_unknown_user(self, client):
        response = client.post("/api/admin/login", json={"username": "ghost", "password": "admin123"})
        assert response.status_code == 401

    def test_login_missing_fields(self, client):
        assert client.post("/api/admin/login", json={"username": "admin"}).status_code == 400

    def test_verify(self, client, admin_headers):
        response = client.get("/api/admin/verify", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "admin"

    def test_verify_without_token(self, client):
        assert client.get("/api/admin/verify").status_code == 401

    def test_verify_expired_token(self, client):
        token = create_jwt_token({"id": 1, "username": "admin"}, expires_delta=timedelta(seconds=-1))
        response = client.get("/api/admin/verify", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403


class TestSettings:
    def test_defaults_seeded(self, client, admin_headers):
        settings = client.get("/api/settings", headers=admin_headers).json()
        assert settings["working_hours_start"] == "09:00"
        assert settings["lunch_break_end"] == "14:00"
        assert settings["email_notifications"] == "true"

    def test_settings_require_admin(self, client):
        assert client.get("/api/settings").status_code == 401
        assert client.post("/api/settings", json={"owner_name": "X"}).status_code == 401

    def test_update_settings(self, client, admin_headers):
        response = client.post(
            "/api/settings",
            json={"business_name": "Navalha de Ouro", "email_notifications": False, "max_daily": 20},
            headers=admin_headers,
        )
        assert response.status_code == 200

        settings = client.get("/api/settings", headers=admin_headers).json()
        assert settings["business_name"] == "Navalha de Ouro"
        assert settings["email_notifications"] == "false"
        assert settings["max_daily"] == "20"

    def test_update_rejects_bad_schedule_time(self, client, admin_headers):
        response = client.post(
            "/api/settings", json={"working_hours_start": "nine"}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_public_settings(self, client):
        response = client.get("/api/settings/public")
        assert response.status_code == 200
        body = response.json()
        assert body["business_name"] == "BarberShop Elite"
        assert "owner_email" not in body
