from fastapi.testclient import TestClient
from ..main import app
from ..config import settings
from ..test_utils import make_book
from .conftest import BookDepsSetup

client = TestClient(app)


def test_create_book(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps()

    response = client.post(
        "/api/books",
        json={"title": "Meu livro", "author": "Autor", "isbn": "123123"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data == {"id": 1, "title": "Meu livro", "author": "Autor", "isbn": "123123"}
    assert book_repo.exists_by_isbn("123123")


def test_create_book_invalid_body(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps()

    response = client.post("/api/books", json={"title": "", "author": "Autor"})

    assert response.status_code == 422
    assert book_repo.books == []


def test_create_book_duplicated_isbn(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps()
    book_repo.save(make_book(isbn="123"))

    response = client.post(
        "/api/books", json={"title": "Outro", "author": "Autor", "isbn": "123"}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Isbn already registered"
    assert len(book_repo.books) == 1


def test_get_book(setup_book_deps: BookDepsSetup):
    setup_book_deps(include_sample_book=True)

    response = client.get("/api/books/1")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["title"] == "The Pragmatic Programmer"
    assert data["author"] == "David Thomas"
    assert data["isbn"] == "9780135957059"


def test_get_book_not_found(setup_book_deps: BookDepsSetup):
    setup_book_deps()

    response = client.get("/api/books/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Book not found"


def test_get_book_by_isbn(setup_book_deps: BookDepsSetup):
    setup_book_deps(include_sample_book=True)

    response = client.get("/api/books/isbn/9780135957059")

    assert response.status_code == 200
    assert response.json()["id"] == 1


def test_get_book_by_isbn_not_found(setup_book_deps: BookDepsSetup):
    setup_book_deps()

    response = client.get("/api/books/isbn/000")

    assert response.status_code == 404


def test_update_book(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps(include_sample_book=True)
    created_at = book_repo.books[0].created_at

    response = client.put(
        "/api/books/1", json={"title": "Updated title", "author": "Updated author"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data == {
        "id": 1,
        "title": "Updated title",
        "author": "Updated author",
        "isbn": "9780135957059",
    }
    stored = book_repo.find_by_id(1)
    assert stored is not None
    assert stored.title == "Updated title"
    assert stored.created_at == created_at


def test_update_book_not_found(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps()

    response = client.put("/api/books/1", json={"title": "T", "author": "A"})

    assert response.status_code == 404
    assert book_repo.books == []


def test_delete_book(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps(include_sample_book=True)

    response = client.delete("/api/books/1")

    assert response.status_code == 204
    assert book_repo.find_by_id(1) is None


def test_delete_book_not_found(setup_book_deps: BookDepsSetup):
    setup_book_deps()

    response = client.delete("/api/books/999")

    assert response.status_code == 404


def test_find_books(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps()
    book_repo.save(make_book(title="Dom Casmurro", author="Machado de Assis", isbn="1"))
    book_repo.save(make_book(title="Iracema", author="Jose de Alencar", isbn="2"))
    book_repo.save(make_book(title="Helena", author="Machado de Assis", isbn="3"))

    response = client.get("/api/books", params={"author": "machado", "size": 1})

    assert response.status_code == 200
    data = response.json()
    assert data["total_elements"] == 2
    assert data["total_pages"] == 2
    assert data["page_number"] == 0
    assert data["page_size"] == 1
    assert data["is_first"] is True
    assert data["is_last"] is False
    assert [b["title"] for b in data["content"]] == ["Dom Casmurro"]


def test_find_books_second_page(setup_book_deps: BookDepsSetup):
    book_repo = setup_book_deps()
    book_repo.save(make_book(title="Dom Casmurro", author="Machado de Assis", isbn="1"))
    book_repo.save(make_book(title="Helena", author="Machado de Assis", isbn="3"))

    response = client.get(
        "/api/books", params={"author": "Machado", "page": 1, "size": 1}
    )

    data = response.json()
    assert [b["title"] for b in data["content"]] == ["Helena"]
    assert data["is_last"] is True


def test_find_books_defaults(setup_book_deps: BookDepsSetup):
    setup_book_deps(include_sample_book=True)

    response = client.get("/api/books")

    assert response.status_code == 200
    data = response.json()
    assert data["total_elements"] == 1
    assert data["page_size"] == settings.default_page_size


def test_find_books_caps_page_size(setup_book_deps: BookDepsSetup):
    setup_book_deps()

    response = client.get("/api/books", params={"size": settings.max_page_size + 50})

    assert response.status_code == 200
    assert response.json()["page_size"] == settings.max_page_size


def test_find_books_rejects_negative_page(setup_book_deps: BookDepsSetup):
    setup_book_deps()

    response = client.get("/api/books", params={"page": -1})

    assert response.status_code == 422
