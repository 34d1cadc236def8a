"""HTTP tests for the /books endpoints."""

from fastapi.testclient import TestClient

NOT_FOUND = {"message": "Libro no encontrado"}


class TestCreateBook:
    def test_create_returns_book_with_id(self, client: TestClient, book_payload):
        response = client.post("/books", json=book_payload())

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data["id"], int)
        assert data["autor"] == "Gabriel García Márquez"
        assert data["isbn"] == 9780307474728
        assert data["editorial"] == "Vintage Español"
        assert data["paginas"] == 496

    def test_created_ids_are_unique(self, client: TestClient):
        ids = {
            client.post("/books", json={"autor": "A", "isbn": isbn}).json()["id"]
            for isbn in (1, 2, 3)
        }

        assert len(ids) == 3

    def test_create_accepts_urlencoded_body(self, client: TestClient):
        response = client.post(
            "/books", data={"autor": "Borges", "isbn": "9788499089515", "paginas": "208"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["isbn"] == 9788499089515
        assert data["paginas"] == 208

    def test_duplicate_isbn_fails(self, client: TestClient):
        first = client.post("/books", json={"autor": "A", "isbn": 111})
        second = client.post("/books", json={"autor": "B", "isbn": 111})

        assert first.status_code == 200
        assert second.status_code == 409
        assert second.json()["kind"] == "duplicate"
        assert second.json()["field"] == "isbn"

    def test_missing_required_field_fails(self, client: TestClient):
        response = client.post("/books", json={"editorial": "Anagrama"})

        assert response.status_code == 422
        assert response.json()["kind"] == "missing_field"

    def test_unknown_fields_are_ignored(self, client: TestClient):
        response = client.post(
            "/books", json={"autor": "A", "isbn": 111, "id": 77, "titulo": "x"}
        )

        assert response.status_code == 200
        assert "titulo" not in response.json()
        assert response.json()["id"] != 77

    def test_malformed_json_fails(self, client: TestClient):
        response = client.post(
            "/books",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "malformed_body"

    def test_isbn_out_of_integer_range_fails(self, client: TestClient):
        response = client.post("/books", json={"autor": "A", "isbn": 10**20})

        assert response.status_code == 422
        assert response.json()["kind"] == "invalid_field"
        assert response.json()["field"] == "isbn"
        assert client.get("/books").json() == []

    def test_numeric_autor_is_stored_as_text(self, client: TestClient):
        response = client.post("/books", json={"autor": 123, "isbn": 5})

        assert response.status_code == 200
        assert response.json()["autor"] == "123"
        assert client.get(f"/books/{response.json()['id']}").json()["autor"] == "123"


class TestReadBooks:
    def test_list_contains_every_created_book(self, client: TestClient):
        created = [
            client.post("/books", json={"autor": f"A{i}", "isbn": 1000 + i}).json()
            for i in range(4)
        ]

        response = client.get("/books")

        assert response.status_code == 200
        assert {b["id"] for b in response.json()} == {b["id"] for b in created}

    def test_list_is_empty_initially(self, client: TestClient):
        response = client.get("/books")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_returns_created_book(self, client: TestClient):
        created = client.post("/books", json={"autor": "A", "isbn": 111}).json()

        response = client.get(f"/books/{created['id']}")

        assert response.status_code == 200
        assert response.json()["isbn"] == 111

    def test_get_missing_returns_null(self, client: TestClient):
        response = client.get("/books/999999")

        assert response.status_code == 200
        assert response.json() is None


class TestUpdateBook:
    def test_update_merges_fields(self, client: TestClient, book_payload):
        created = client.post("/books", json=book_payload()).json()

        response = client.put(f"/books/{created['id']}", json={"paginas": 512})

        assert response.status_code == 200
        data = response.json()
        assert data["paginas"] == 512
        assert data["autor"] == created["autor"]
        assert data["isbn"] == created["isbn"]

    def test_update_accepts_urlencoded_body(self, client: TestClient):
        created = client.post("/books", json={"autor": "A", "isbn": 111}).json()

        response = client.put(f"/books/{created['id']}", data={"editorial": "Planeta"})

        assert response.status_code == 200
        assert response.json()["editorial"] == "Planeta"

    def test_update_missing_returns_404(self, client: TestClient):
        response = client.put("/books/999999", json={"autor": "X"})

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    def test_update_to_taken_isbn_fails(self, client: TestClient):
        client.post("/books", json={"autor": "A", "isbn": 111})
        second = client.post("/books", json={"autor": "B", "isbn": 222}).json()

        response = client.put(f"/books/{second['id']}", json={"isbn": 111})

        assert response.status_code == 409
        assert client.get(f"/books/{second['id']}").json()["isbn"] == 222

    def test_update_paginas_out_of_integer_range_fails(self, client: TestClient):
        created = client.post("/books", json={"autor": "A", "isbn": 111}).json()

        response = client.put(f"/books/{created['id']}", json={"paginas": 2**63})

        assert response.status_code == 422
        assert response.json()["field"] == "paginas"
        assert client.get(f"/books/{created['id']}").json()["paginas"] is None


class TestDeleteBook:
    def test_delete_then_get_returns_null(self, client: TestClient):
        created = client.post("/books", json={"autor": "A", "isbn": 111}).json()

        response = client.delete(f"/books/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Libro eliminado"}
        assert client.get(f"/books/{created['id']}").json() is None

    def test_delete_missing_returns_404(self, client: TestClient):
        response = client.delete("/books/999999")

        assert response.status_code == 404
        assert response.json() == NOT_FOUND

    def test_isbn_is_reusable_after_delete(self, client: TestClient):
        created = client.post("/books", json={"autor": "A", "isbn": 111}).json()
        client.delete(f"/books/{created['id']}")

        response = client.post("/books", json={"autor": "B", "isbn": 111})

        assert response.status_code == 200
        assert response.json()["id"] != created["id"]


def test_responses_carry_request_id(client: TestClient):
    response = client.get("/books", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
