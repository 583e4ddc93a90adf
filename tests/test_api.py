from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from taskboard.config import settings
from taskboard.models import Card


def _create_board(client: TestClient, name: str = "Sprint1", password: str = "secret1") -> dict:
    response = client.post("/api/boards", json={"name": name, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_board_sets_http_only_session_cookie(client: TestClient):
    response = client.post("/api/boards", json={"name": "Sprint1", "password": "secret1"})

    assert response.status_code == 201
    board = response.json()
    assert [column["order"] for column in board["columns"]] == [1, 2, 3]
    assert "password_hash" not in board

    set_cookie = response.headers["set-cookie"]
    assert set_cookie.startswith(f"{settings.AUTH_COOKIE_NAME}=")
    assert "HttpOnly" in set_cookie
    assert "samesite=lax" in set_cookie.lower()

    board_view = client.get("/api/board")
    assert board_view.status_code == 200
    assert board_view.json()["id"] == board["id"]


def test_protected_routes_require_cookie(client: TestClient):
    response = client.get("/api/board")

    assert response.status_code == 401
    assert response.json() == {"error": "Authorization required"}


def test_garbage_cookie_is_rejected(client: TestClient):
    client.cookies.set(settings.AUTH_COOKIE_NAME, "garbage")

    response = client.post("/api/columns", json={"name": "Review"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


def test_create_board_validation_errors_use_error_body(client: TestClient):
    short = client.post("/api/boards", json={"name": "Sprint", "password": "123"})
    assert short.status_code == 400
    assert short.json() == {"error": "Password must be at least 6 characters"}

    malformed = client.post("/api/boards", json={"name": "Sprint"})
    assert malformed.status_code == 400
    assert malformed.json() == {"error": "Invalid request format"}


def test_login_flow(client_factory):
    owner = client_factory()
    board = _create_board(owner)

    visitor = client_factory()
    rejected = visitor.post(f"/api/boards/{board['id']}/login", json={"password": "nope!!"})
    assert rejected.status_code == 401
    assert rejected.json() == {"error": "Invalid password"}

    accepted = visitor.post(f"/api/boards/{board['id']}/login", json={"password": "secret1"})
    assert accepted.status_code == 200
    assert accepted.json()["board_id"] == board["id"]
    assert visitor.get("/api/board").json()["id"] == board["id"]


def test_login_to_unknown_board_is_unauthorized(client: TestClient):
    response = client.post("/api/boards/" + "0" * 32 + "/login", json={"password": "secret1"})

    assert response.status_code == 401


def test_logout_clears_cookie(client: TestClient):
    _create_board(client)

    response = client.post("/api/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out"}
    assert settings.AUTH_COOKIE_NAME in response.headers["set-cookie"]
    assert client.get("/api/board").status_code == 401


def test_card_and_column_lifecycle(client: TestClient):
    board = _create_board(client)
    todo, doing, _ = (column["id"] for column in board["columns"])

    first = client.post("/api/cards", json={"title": "Fix bug", "column_id": todo})
    second = client.post("/api/cards", json={"title": "Write docs", "column_id": todo, "assignee": "kim"})
    assert first.status_code == 201
    assert (first.json()["order"], second.json()["order"]) == (1, 2)

    updated = client.put(f"/api/cards/{first.json()['id']}", json={"description": "Null pointer"})
    assert updated.status_code == 200
    assert updated.json()["title"] == "Fix bug"
    assert updated.json()["description"] == "Null pointer"

    moved = client.put(f"/api/cards/{first.json()['id']}/move", json={"column_id": doing})
    assert moved.status_code == 200
    assert moved.json()["column_id"] == doing
    assert moved.json()["order"] == 1

    column = client.post("/api/columns", json={"name": "Review"})
    assert column.status_code == 201
    assert column.json()["order"] == 4
    assert column.json()["cards"] == []

    renamed = client.put(f"/api/columns/{column.json()['id']}", json={"name": "QA"})
    assert renamed.json()["name"] == "QA"

    deleted = client.delete(f"/api/columns/{todo}")
    assert deleted.status_code == 200

    view = client.get("/api/board").json()
    assert [c["name"] for c in view["columns"]] == ["В работе", "Выполнено", "QA"]
    assert [card["title"] for card in view["columns"][0]["cards"]] == ["Fix bug"]

    removed = client.delete(f"/api/cards/{first.json()['id']}")
    assert removed.status_code == 200
    assert client.delete(f"/api/cards/{first.json()['id']}").status_code == 404


def test_credential_for_one_board_cannot_touch_another(client_factory):
    alice = client_factory()
    bob = client_factory()
    board_a = _create_board(alice, name="A")
    board_b = _create_board(bob, name="B")

    card_b = bob.post("/api/cards", json={"title": "Private", "column_id": board_b["columns"][0]["id"]}).json()

    assert alice.get("/api/board").json()["id"] == board_a["id"]
    assert alice.put(f"/api/cards/{card_b['id']}", json={"title": "Mine"}).status_code == 404
    assert alice.put(
        f"/api/cards/{card_b['id']}/move", json={"column_id": board_a["columns"][1]["id"]}
    ).status_code == 404
    assert alice.delete(f"/api/cards/{card_b['id']}").status_code == 404
    assert alice.delete(f"/api/columns/{board_b['columns'][0]['id']}").status_code == 404
    create_foreign = alice.post("/api/cards", json={"title": "Sneaky", "column_id": board_b["columns"][0]["id"]})
    assert create_foreign.status_code == 404
    assert create_foreign.json() == {"error": "Column not found"}

    untouched = bob.get("/api/board").json()
    assert [card["title"] for card in untouched["columns"][0]["cards"]] == ["Private"]
    assert len(untouched["columns"]) == 3


def test_create_card_accepts_null_optional_fields(client: TestClient):
    board = _create_board(client)

    response = client.post(
        "/api/cards",
        json={"title": "Fix", "column_id": board["columns"][0]["id"], "description": None, "assignee": None},
    )

    assert response.status_code == 201, response.text
    assert response.json()["description"] == ""
    assert response.json()["assignee"] == ""


def test_database_failure_returns_generic_error_body(client: TestClient, db_session: Session):
    _create_board(client)
    Card.__table__.drop(bind=db_session.get_bind())

    response = client.get("/api/board")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_openapi_documents_error_body(client: TestClient):
    schema = client.get("/openapi.json").json()

    assert "ErrorResponse" in schema["components"]["schemas"]
    board_responses = schema["paths"]["/api/board"]["get"]["responses"]
    assert board_responses["401"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
