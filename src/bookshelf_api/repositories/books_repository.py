from collections.abc import Sequence
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from bookshelf_api.domain import BookId, Isbn
from bookshelf_api.models import Book


class BooksRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_books(self) -> Sequence[Book]:
        return self.session.scalars(select(Book).order_by(Book.id)).all()

    def get_by_id(self, book_id: BookId) -> Book | None:
        return self.session.get(Book, book_id)

    def get_by_isbn(self, isbn: Isbn) -> Book | None:
        stmt = select(Book).where(Book.isbn == isbn)
        return self.session.scalars(stmt).first()

    def create(
        self,
        isbn: Isbn,
        title: str,
        pages: int,
        published: int,
        image: str | None = None,
        commit: bool = True,
    ) -> Book:
        book = Book(isbn=isbn, title=title, pages=pages, published=published, image=image)
        self.session.add(book)
        if commit:
            self.session.commit()
            self.session.refresh(book)
        else:
            # flush to get the surrogate key assigned
            self.session.flush()

        return book

    def update_fields(self, book_id: BookId, fields: dict[str, Any]) -> int:
        """
        Writes only the given columns and returns the number of rows affected.
        """
        if not fields:
            return 0

        stmt = update(Book).where(Book.id == book_id).values(**fields)
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        self.session.commit()

        return max(getattr(result, "rowcount", 0), 0)

    def delete(self, book: Book) -> None:
        self.session.delete(book)
        self.session.commit()
