"""Tests for the /students HTTP contract."""

from sqlalchemy.exc import OperationalError
from fastapi.testclient import TestClient

from app.main import app
from app.services.student import repository


class TestListStudents:
    """GET /students"""

    def test_empty_list(self, client):
        response = client.get("/students")

        assert response.status_code == 200
        assert response.json() == []

    def test_contains_every_created_student(self, client, create):
        created = [create(name) for name in ("Ana", "Bea", "Carlos")]

        response = client.get("/students")

        assert response.status_code == 200
        body = response.json()
        assert len(body) >= 3
        assert {s["id"] for s in created} <= {s["id"] for s in body}


class TestGetStudent:
    """GET /students/{id}"""

    def test_get_after_create(self, client, create):
        created = create("Ana")

        response = client.get(f"/students/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "name": "Ana"}

    def test_unknown_id_returns_404_with_id_in_message(self, client):
        response = client.get("/students/999999")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert "999999" in error["message"]
        assert response.json()["success"] is False

    def test_repeated_get_is_identical(self, client, create):
        created = create("Ana")

        first = client.get(f"/students/{created['id']}")
        second = client.get(f"/students/{created['id']}")

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()

    def test_non_integer_id_is_rejected(self, client):
        response = client.get("/students/abc")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_oversized_id_is_rejected_without_reaching_database(self, client):
        response = client.get("/students/99999999999999999999999")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_id_above_32_bits_is_not_found(self, client):
        response = client.get("/students/3000000000")

        assert response.status_code == 404

    def test_bigint_limit_is_the_largest_accepted_id(self, client):
        assert client.get(f"/students/{2 ** 63 - 1}").status_code == 404
        assert client.put(f"/students/{2 ** 63}", json={"name": "Bea"}).status_code == 400
        assert client.delete(f"/students/{2 ** 63}").status_code == 400


class TestCreateStudent:
    """POST /students"""

    def test_returns_201_with_assigned_id(self, client):
        response = client.post("/students", json={"name": "Ana"})

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["name"] == "Ana"

    def test_ids_are_unique(self, client, create):
        ids = [create(f"student {i}")["id"] for i in range(10)]

        assert len(set(ids)) == 10

    def test_null_id_is_accepted(self, client):
        response = client.post("/students", json={"id": None, "name": "Ana"})

        assert response.status_code == 201
        assert response.json()["id"] is not None

    def test_client_supplied_id_is_rejected(self, client):
        response = client.post("/students", json={"id": 12, "name": "Ana"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"
        assert client.get("/students").json() == []

    def test_missing_name_is_rejected(self, client):
        response = client.post("/students", json={})

        assert response.status_code == 400
        assert "name" in response.json()["error"]["details"]

    def test_malformed_json_is_rejected(self, client):
        response = client.post(
            "/students",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_malformed_json_details_are_keyed_by_body(self, client):
        response = client.post(
            "/students",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert list(response.json()["error"]["details"]) == ["body"]


class TestUpdateStudent:
    """PUT /students/{id}"""

    def test_update_then_get_reflects_new_name(self, client, create):
        created = create("Ana")

        response = client.put(f"/students/{created['id']}", json={"name": "Bea"})

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "name": "Bea"}
        assert client.get(f"/students/{created['id']}").json() == {"id": created["id"], "name": "Bea"}

    def test_id_in_body_does_not_change_id(self, client, create):
        created = create("Ana")

        response = client.put(f"/students/{created['id']}", json={"id": 555, "name": "Bea"})

        assert response.json()["id"] == created["id"]
        assert client.get("/students/555").status_code == 404

    def test_unknown_id_returns_404(self, client):
        response = client.put("/students/999999", json={"name": "Bea"})

        assert response.status_code == 404
        assert "999999" in response.json()["error"]["message"]


class TestDeleteStudent:
    """DELETE /students/{id}"""

    def test_delete_returns_204_then_404(self, client, create):
        created = create("Ana")

        response = client.delete(f"/students/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/students/{created['id']}").status_code == 404

    def test_unknown_id_returns_404(self, client):
        assert client.delete("/students/999999").status_code == 404

    def test_second_delete_returns_404(self, client, create):
        created = create("Ana")

        assert client.delete(f"/students/{created['id']}").status_code == 204
        assert client.delete(f"/students/{created['id']}").status_code == 404

    def test_ids_are_not_reused(self, client, create):
        create("Ana")
        last = create("Bea")
        client.delete(f"/students/{last['id']}")

        assert create("Carlos")["id"] > last["id"]


class TestErrors:
    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/teachers")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "HTTP_ERROR"

    def test_method_not_allowed(self, client):
        response = client.patch("/students/1", json={"name": "Bea"})

        assert response.status_code == 405

    def test_database_failure_returns_500(self, monkeypatch):
        def broken(db):
            raise OperationalError("SELECT", {}, Exception("database is down"))

        monkeypatch.setattr(repository, "find_all", broken)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/students")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_SERVER_ERROR"
        assert error["details"] is None


def test_root_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"
