import pytest
from fastapi.testclient import TestClient

from tests.integration.conftest import AUTHOR_PAYLOAD, BOOK_PAYLOAD, DataFactory


@pytest.fixture
def sample_books(test_data: DataFactory):
    book1 = test_data.create_book(
        isbn="978-0-14-243717-9",
        title="Adventures of Huckleberry Finn",
        pages=366,
        published=1884,
        image="https://example.com/images/huck-finn.jpg",
    )
    book2 = test_data.create_book(
        isbn="978-0-14-303956-3",
        title="The Adventures of Tom Sawyer",
        pages=274,
        published=1876,
    )
    test_data.commit()
    return [book1, book2]


def test_list_books(client: TestClient, sample_books):
    response = client.get("/books")

    assert response.status_code == 200
    books = response.json()["books"]
    assert len(books) == 2
    titles = [book["title"] for book in books]
    assert "Adventures of Huckleberry Finn" in titles
    assert "The Adventures of Tom Sawyer" in titles


def test_create_book_then_duplicate_isbn(client: TestClient):
    response = client.post("/books", json=BOOK_PAYLOAD)
    assert response.status_code == 201
    assert response.json() == {"message": "Book successfully created"}

    response = client.post("/books", json={**BOOK_PAYLOAD, "title": "Another"})
    assert response.status_code == 400
    assert response.json() == {"message": "ISBN Already exists"}


def test_create_book_missing_fields(client: TestClient):
    response = client.post(
        "/books",
        json={"isbn": "SOAOPSA", "title": "Book Title", "image": "https://example.com/b.jpg"},
    )

    assert response.status_code == 400
    fields = {err["field"] for err in response.json()["error"]}
    assert fields == {"pages", "published"}


def test_get_book_by_id(client: TestClient, sample_books):
    book_id = sample_books[0].id
    response = client.get(f"/books/{book_id}")

    assert response.status_code == 200
    book = response.json()["book"]
    assert book["id"] == book_id
    assert book["isbn"] == "978-0-14-243717-9"
    assert book["published"] == 1884
    assert "createdAt" in book


def test_get_book_not_found(client: TestClient):
    response = client.get("/books/9999")

    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


def test_update_book_partial(client: TestClient, sample_books):
    book_id = sample_books[1].id

    response = client.put(f"/books/{book_id}", json={"pages": 300})
    assert response.status_code == 200
    assert response.json() == {"message": "Book successfully updated"}

    book = client.get(f"/books/{book_id}").json()["book"]
    assert book["pages"] == 300
    assert book["title"] == "The Adventures of Tom Sawyer"
    assert book["published"] == 1876


def test_update_book_to_taken_isbn(client: TestClient, sample_books):
    response = client.put(
        f"/books/{sample_books[1].id}", json={"isbn": sample_books[0].isbn}
    )

    assert response.status_code == 400
    assert response.json() == {"message": "ISBN Already exists"}


def test_update_book_empty_body_fails(client: TestClient, sample_books):
    response = client.put(f"/books/{sample_books[0].id}", json={})

    assert response.status_code == 400
    assert response.json() == {"message": "Update failed"}


def test_update_book_not_found(client: TestClient):
    response = client.put("/books/9999", json={"pages": 10})

    assert response.status_code == 404


def test_delete_book_then_get(client: TestClient, sample_books):
    book_id = sample_books[0].id

    response = client.delete(f"/books/{book_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Book successfully deleted"}

    assert client.get(f"/books/{book_id}").status_code == 404


def test_delete_book_removes_links_but_keeps_authors(
    client: TestClient, test_data: DataFactory, sample_books
):
    author = test_data.create_author()
    test_data.link(sample_books[0], author)
    test_data.commit()

    response = client.delete(f"/books/{sample_books[0].id}")

    assert response.status_code == 200
    assert test_data.get_links() == []
    assert client.get(f"/authors/{author.id}/books").json() == []
    assert client.get(f"/authors/{author.id}").status_code == 200


def test_delete_book_not_found(client: TestClient):
    response = client.delete("/books/9999")

    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


def test_add_author_to_book_then_duplicate(client: TestClient, sample_books):
    book_id = sample_books[0].id

    response = client.post(f"/books/{book_id}/authors", json=AUTHOR_PAYLOAD)
    assert response.status_code == 200
    assert response.json() == {"message": "Author added to the book successfully"}

    authors = client.get(f"/books/{book_id}/authors").json()
    assert [a["lastName"] for a in authors] == ["Twain"]

    response = client.post(f"/books/{book_id}/authors", json=AUTHOR_PAYLOAD)
    assert response.status_code == 400
    assert response.json() == {"message": "Author is already added to the book"}


def test_add_same_author_to_two_books_reuses_author(client: TestClient, sample_books):
    for book in sample_books:
        response = client.post(f"/books/{book.id}/authors", json=AUTHOR_PAYLOAD)
        assert response.status_code == 200

    authors = client.get("/authors").json()["authors"]
    assert len(authors) == 1

    books = client.get(f"/authors/{authors[0]['id']}/books").json()
    assert sorted(b["id"] for b in books) == sorted(b.id for b in sample_books)


def test_add_author_to_missing_book(client: TestClient):
    response = client.post("/books/9999/authors", json=AUTHOR_PAYLOAD)

    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


def test_list_authors_for_missing_book(client: TestClient):
    response = client.get("/books/9999/authors")

    assert response.status_code == 404


def test_remove_author_from_book(client: TestClient, test_data: DataFactory, sample_books):
    author = test_data.create_author()
    test_data.link(sample_books[0], author)
    test_data.commit()

    response = client.delete(f"/books/{sample_books[0].id}/authors/{author.id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Author removed from the book successfully"}
    assert client.get(f"/books/{sample_books[0].id}/authors").json() == []
    assert client.get(f"/authors/{author.id}").status_code == 200


def test_remove_unrelated_author_from_book(
    client: TestClient, test_data: DataFactory, sample_books
):
    author = test_data.create_author()
    test_data.commit()

    response = client.delete(f"/books/{sample_books[0].id}/authors/{author.id}")

    assert response.status_code == 400
    assert response.json() == {"message": "Book is not related with this author"}


def test_remove_missing_author_from_book(client: TestClient, sample_books):
    response = client.delete(f"/books/{sample_books[0].id}/authors/missing")

    assert response.status_code == 404
    assert response.json() == {"message": "Author not found"}


def test_scenario_book_lifecycle_with_author(client: TestClient):
    assert client.post("/books", json=BOOK_PAYLOAD).status_code == 201
    assert client.post("/authors", json=AUTHOR_PAYLOAD).status_code == 201
    author_id = client.get("/authors").json()["authors"][0]["id"]

    new_book = {**BOOK_PAYLOAD, "isbn": "X2", "title": "Life on the Mississippi"}
    response = client.post(f"/authors/{author_id}/books", json=new_book)
    assert response.status_code == 200
    assert response.json() == {"message": "Book added to the author successfully"}

    response = client.post(f"/authors/{author_id}/books", json=new_book)
    assert response.status_code == 400
    assert response.json() == {"message": "Book is already added to the author"}

    isbns = sorted(b["isbn"] for b in client.get("/books").json()["books"])
    assert isbns == ["X1", "X2"]
