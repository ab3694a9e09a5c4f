from unittest.mock import Mock

from library_api.app.api.deps import get_book_service
from library_api.app.core.exceptions import IllegalArgumentError
from library_api.app.main import app
from library_api.app.models import Book
from library_api.app.services import BookService

BOOK = {"title": "Lalalala", "author": "Ederson", "isbn": "001"}


def create_book(client, **overrides):
    response = client.post("/api/books", json={**BOOK, **overrides})
    assert response.status_code == 201
    return response.json()


def test_create_book(client):
    response = client.post("/api/books", json=BOOK)

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], int)
    assert {k: body[k] for k in ("title", "author", "isbn")} == BOOK


def test_create_book_without_data_returns_three_errors(client):
    response = client.post("/api/books", json={})

    assert response.status_code == 400
    assert sorted(response.json()["erros"]) == [
        "author must not be empty",
        "isbn must not be empty",
        "title must not be empty",
    ]


def test_create_book_with_empty_title(client):
    response = client.post("/api/books", json={**BOOK, "title": ""})

    assert response.status_code == 400
    assert response.json() == {"erros": ["title must not be empty"]}


def test_create_book_with_duplicate_isbn(client):
    create_book(client)

    response = client.post("/api/books", json=BOOK)

    assert response.status_code == 400
    assert response.json() == {"erros": ["Isbn já cadastrado"]}


def test_get_book(client):
    book = create_book(client)

    response = client.get(f"/api/books/{book['id']}")

    assert response.status_code == 200
    assert response.json() == book


def test_get_unknown_book_returns_404(client):
    response = client.get("/api/books/999")

    assert response.status_code == 404
    assert response.json() == {"erros": ["Book not found"]}


def test_update_book_keeps_isbn(client):
    book = create_book(client)

    response = client.put(
        f"/api/books/{book['id']}",
        json={"title": "Novo", "author": "Outro", "isbn": "999"},
    )

    assert response.status_code == 200
    assert response.json() == {"id": book["id"], "title": "Novo", "author": "Outro", "isbn": "001"}


def test_update_unknown_book_returns_404(client):
    response = client.put("/api/books/999", json={"title": "Novo", "author": "Outro"})

    assert response.status_code == 404


def test_delete_book(client):
    book = create_book(client)

    response = client.delete(f"/api/books/{book['id']}")

    assert response.status_code == 204
    assert client.get(f"/api/books/{book['id']}").status_code == 404


def test_delete_unknown_book_returns_404(client):
    assert client.delete("/api/books/999").status_code == 404


def test_find_books(client):
    create_book(client, isbn="1", title="Python Fluente")
    create_book(client, isbn="2", title="Aprendendo Python")
    create_book(client, isbn="3", title="Dom Casmurro")

    response = client.get("/api/books", params={"title": "python", "page": 0, "size": 1})

    assert response.status_code == 200
    page = response.json()
    assert page["totalElements"] == 2
    assert page["totalPages"] == 2
    assert page["number"] == 0
    assert page["size"] == 1
    assert page["first"] is True
    assert page["last"] is False
    assert [b["isbn"] for b in page["content"]] == ["1"]


def test_invalid_page_parameters(client):
    response = client.get("/api/books", params={"page": -1})

    assert response.status_code == 400
    assert len(response.json()["erros"]) == 1


def test_loans_of_book(client):
    book = create_book(client)
    client.post("/api/loans", json={"isbn": "001", "customer": "Fulano"})

    response = client.get(f"/api/books/{book['id']}/loans")

    assert response.status_code == 200
    page = response.json()
    assert page["totalElements"] == 1
    loan = page["content"][0]
    assert loan["customer"] == "Fulano"
    assert loan["book"] == book


def test_loans_of_unknown_book_returns_404(client):
    assert client.get("/api/books/999/loans").status_code == 404


def test_update_failing_with_missing_id_is_reported_as_400(client):
    service = Mock(spec=BookService)
    service.get_by_id.return_value = Book(title="t", author="a", isbn="1")
    service.update.side_effect = IllegalArgumentError("Book id cant be null")
    app.dependency_overrides[get_book_service] = lambda: service

    response = client.put("/api/books/1", json={"title": "t", "author": "a"})

    assert response.status_code == 400
    assert response.json() == {"erros": ["Book id cant be null"]}


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nothing")

    assert response.status_code == 404
    assert response.json() == {"erros": ["Not Found"]}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_get_book_with_id_beyond_integer_range_returns_404(client):
    response = client.get("/api/books/99999999999999999999")

    assert response.status_code == 404
    assert response.json() == {"erros": ["Book not found"]}


def test_loans_of_book_with_id_beyond_integer_range_returns_404(client):
    assert client.get("/api/books/99999999999999999999/loans").status_code == 404
    assert client.delete("/api/books/99999999999999999999").status_code == 404


def test_page_beyond_offset_range_is_rejected(client):
    response = client.get("/api/books", params={"page": 10**17, "size": 1000})

    assert response.status_code == 400
    assert len(response.json()["erros"]) == 1
