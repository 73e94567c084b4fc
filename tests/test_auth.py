"""
Tests for auth/login and auth/me
"""
import pytest
from fastapi import status
from sqlalchemy.exc import OperationalError

from portfolio_api.apps.authentication.models import User
from portfolio_api.database import get_async_session
from portfolio_api.main import app


class BrokenSession:
    """Stands in for a session when no database is reachable"""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("could not connect to server"))

    async def rollback(self):
        pass


@pytest.fixture
def client_without_db(client):
    async def override_get_async_session():
        yield BrokenSession()

    app.dependency_overrides[get_async_session] = override_get_async_session
    return client


class TestLogin:

    @pytest.mark.asyncio
    async def test_demo_login_without_database(self, client_without_db):
        response = await client_without_db.post(
            "/api/auth/login", json={"email": "admin@example.com", "password": "admin"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "token": "demo-token",
            "user": {"id": 1, "email": "admin@example.com", "name": "Admin", "role": "admin"},
        }

    @pytest.mark.asyncio
    async def test_login_with_user_row(self, client, test_session):
        test_session.add(User(email="owner@example.com", password="s3cret", name="Owner"))
        await test_session.commit()

        response = await client.post(
            "/api/auth/login", json={"email": "owner@example.com", "password": "s3cret"}
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["token"]
        assert body["token"] != "demo-token"
        assert body["user"] == {"id": 1, "email": "owner@example.com", "name": "Owner", "role": "admin"}

    @pytest.mark.asyncio
    async def test_wrong_password(self, client, test_session):
        test_session.add(User(email="owner@example.com", password="s3cret"))
        await test_session.commit()

        response = await client.post(
            "/api/auth/login", json={"email": "owner@example.com", "password": "nope"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "Invalid credentials"}

    @pytest.mark.asyncio
    async def test_database_error_is_invalid_credentials(self, client_without_db):
        response = await client_without_db.post(
            "/api/auth/login", json={"email": "someone@example.com", "password": "x"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_login_requires_post(self, client):
        response = await client.get("/api/auth/login")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


class TestMe:

    @pytest.mark.asyncio
    async def test_me_returns_first_user(self, client, test_session):
        test_session.add_all([
            User(email="first@example.com", password="x", name="First"),
            User(email="second@example.com", password="y", name="Second"),
        ])
        await test_session.commit()

        response = await client.get("/api/auth/me")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": 1,
            "email": "first@example.com",
            "name": "First",
            "avatar": None,
            "isActive": True,
            "role": "admin",
        }

    @pytest.mark.asyncio
    async def test_me_defaults_without_users(self, client):
        response = await client.get("/api/auth/me")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["email"] == "admin@example.com"
        assert response.json()["role"] == "admin"

    @pytest.mark.asyncio
    async def test_me_defaults_on_database_error(self, client_without_db):
        response = await client_without_db.get("/api/auth/me")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Admin"

    @pytest.mark.asyncio
    async def test_update_me(self, client, test_session):
        test_session.add(User(email="owner@example.com", password="old", avatar="a.png"))
        await test_session.commit()

        response = await client.patch(
            "/api/auth/me",
            json={"name": "New Name", "avatar": None, "password": "", "email": 5},
        )

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["name"] == "New Name"
        assert body["avatar"] is None
        assert body["email"] == "owner@example.com"

        login = await client.post(
            "/api/auth/login", json={"email": "owner@example.com", "password": "old"}
        )
        assert login.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_update_me_without_user(self, client):
        response = await client.put("/api/auth/me", json={"name": "x"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "User not found"}

    @pytest.mark.asyncio
    async def test_me_rejects_delete(self, client):
        response = await client.delete("/api/auth/me")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
