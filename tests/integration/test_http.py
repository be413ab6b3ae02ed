"""Integration tests for the HTTP surface with user management installed."""
from fastapi.testclient import TestClient


def _create_user(client: TestClient, username: str = "ada", password: str = "hunter2") -> dict:
    response = client.post("/user", json={
        "data": {"type": "user", "attributes": {"username": username, "password": password}},
    })
    assert response.status_code == 201
    return response.json()["data"]


def _login(client: TestClient, username: str = "ada", password: str = "hunter2"):
    return client.post("/session", json={
        "data": {"type": "session", "attributes": {"username": username, "password": password}},
    })


def test_addons_installed_by_lifespan(test_client: TestClient, application) -> None:
    assert [t.name for t in application.types] == ["user", "session"]
    assert len(application.processors) == 2


def test_create_user_hides_password(test_client: TestClient, application) -> None:
    user = _create_user(test_client)

    assert user["type"] == "user"
    assert user["attributes"] == {"username": "ada"}

    stored = test_client.get(f"/user/{user['id']}")
    assert stored.status_code == 200
    assert "password" not in stored.json()["data"]["attributes"]


def test_login_succeeds(test_client: TestClient) -> None:
    user = _create_user(test_client)

    response = _login(test_client)

    assert response.status_code == 201
    session = response.json()["data"]
    assert session["attributes"]["token"]
    assert session["attributes"]["username"] == "ada"
    assert "password" not in session["attributes"]
    assert session["relationships"]["user"] == {"type": "user", "id": user["id"]}


def test_login_denied_returns_401(test_client: TestClient) -> None:
    _create_user(test_client)

    response = _login(test_client, password="wrong")

    assert response.status_code == 401
    assert response.json()["errors"][0]["status"] == "401"


def test_login_unknown_user_returns_401(test_client: TestClient) -> None:
    response = _login(test_client, username="nobody")
    assert response.status_code == 401


def test_unknown_type_returns_404(test_client: TestClient) -> None:
    response = test_client.post("/widget", json={"data": {"type": "widget", "attributes": {}}})
    assert response.status_code == 404


def test_missing_resource_returns_404(test_client: TestClient) -> None:
    assert test_client.get("/user/missing").status_code == 404


def test_delete_user(test_client: TestClient) -> None:
    user = _create_user(test_client)

    assert test_client.delete(f"/user/{user['id']}").status_code == 204
    assert test_client.get(f"/user/{user['id']}").status_code == 404


def test_login_without_username_returns_401(test_client: TestClient) -> None:
    created = test_client.post("/user", json={
        "data": {"type": "user", "attributes": {"email": "grace@example.com", "password": "pw"}},
    })
    assert created.status_code == 201

    response = test_client.post("/session", json={
        "data": {"type": "session", "attributes": {"password": "pw"}},
    })

    assert response.status_code == 401


def test_create_with_existing_id_returns_409(test_client: TestClient) -> None:
    user = _create_user(test_client)

    response = test_client.post("/user", json={
        "data": {"type": "user", "id": user["id"], "attributes": {"username": "mallory", "password": "x"}},
    })

    assert response.status_code == 409
    assert response.json()["errors"][0]["status"] == "409"
    assert test_client.get(f"/user/{user['id']}").json()["data"]["attributes"]["username"] == "ada"
    assert _login(test_client).status_code == 201
