from models import is_object_id
from repositories import users_repo
from sqlalchemy.exc import OperationalError


def test_landing_page_and_static_assets(client):
    page = client.get("/")
    assert page.status_code == 200
    assert b"Exercise tracker" in page.data

    stylesheet = client.get("/style.css")
    assert stylesheet.status_code == 200


def test_create_user_from_form(client):
    response = client.post("/api/users", data={"username": "fcc_test"})
    assert response.status_code == 200
    body = response.get_json()
    assert body["username"] == "fcc_test"
    assert is_object_id(body["_id"])
    assert set(body) == {"username", "_id"}


def test_create_user_from_json(client):
    response = client.post("/api/users", json={"username": "json_user"})
    assert response.status_code == 200
    assert response.get_json()["username"] == "json_user"


def test_duplicate_username_conflicts_without_new_record(client):
    first = client.post("/api/users", data={"username": "taken"})
    assert first.status_code == 200

    second = client.post("/api/users", data={"username": "taken"})
    assert second.status_code == 409
    assert second.get_json() == {"error": "Username already taken"}

    users = client.get("/api/users").get_json()
    assert [user["username"] for user in users] == ["taken"]


def test_create_user_requires_username(client):
    missing = client.post("/api/users", data={})
    assert missing.status_code == 400
    assert missing.get_json() == {"error": "Missing required field(s): username"}

    blank = client.post("/api/users", data={"username": "   "})
    assert blank.status_code == 400
    assert blank.get_json() == {"error": "username must not be empty"}


def test_store_failure_is_reported_generically(client, monkeypatch):
    def failing_create(username):
        raise OperationalError("INSERT INTO users", {}, Exception("disk I/O error"))

    monkeypatch.setattr(users_repo, "create_user", failing_create)

    response = client.post("/api/users", data={"username": "doomed"})
    assert response.status_code == 500
    assert response.get_json() == {"error": "Internal Server Error"}


def test_list_users(client):
    assert client.get("/api/users").get_json() == []

    created = [
        client.post("/api/users", data={"username": name}).get_json()
        for name in ("one", "two")
    ]

    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.get_json() == created


def test_unknown_route_returns_json_error(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert "error" in response.get_json()
