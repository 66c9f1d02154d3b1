import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, exists, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from bookshelf_api.domain import AuthorId, BookId
from bookshelf_api.models import Author, Book, BookAuthor

logger = logging.getLogger(__name__)


class BookAuthorsRepository:
    """Association primitives over the book_authors link table."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add_link(self, book_id: BookId, author_id: AuthorId) -> bool:
        """
        Links a book and an author in a single statement.

        Uses ON CONFLICT (book_id, author_id) DO NOTHING so a concurrent duplicate
        is ignored by the database. Returns True if a new row was inserted.
        """
        dialect = self._session.get_bind().dialect.name
        stmt: Any
        if dialect == "sqlite":
            stmt = sqlite_insert(BookAuthor).values(book_id=book_id, author_id=author_id)
        else:
            stmt = pg_insert(BookAuthor).values(book_id=book_id, author_id=author_id)

        stmt = stmt.on_conflict_do_nothing(index_elements=["book_id", "author_id"])

        result = self._session.execute(stmt)
        self._session.commit()
        # collections loaded earlier in this session no longer reflect the table
        self._session.expire_all()

        inserted = max(getattr(result, "rowcount", 0), 0) > 0
        if not inserted:
            logger.debug("Link book_id=%s author_id=%s already present", book_id, author_id)
        return inserted

    def remove_link(self, book_id: BookId, author_id: AuthorId) -> bool:
        stmt = delete(BookAuthor).where(
            BookAuthor.book_id == book_id, BookAuthor.author_id == author_id
        )
        result = self._session.execute(stmt)
        self._session.commit()
        self._session.expire_all()

        return max(getattr(result, "rowcount", 0), 0) > 0

    def has_link(self, book_id: BookId, author_id: AuthorId) -> bool:
        stmt = select(
            exists().where(BookAuthor.book_id == book_id, BookAuthor.author_id == author_id)
        )
        return bool(self._session.execute(stmt).scalar())

    def list_books_for_author(self, author_id: AuthorId) -> Sequence[Book]:
        stmt = (
            select(Book)
            .join(BookAuthor, BookAuthor.book_id == Book.id)
            .where(BookAuthor.author_id == author_id)
            .order_by(Book.id)
        )
        return self._session.scalars(stmt).all()

    def list_authors_for_book(self, book_id: BookId) -> Sequence[Author]:
        stmt = (
            select(Author)
            .join(BookAuthor, BookAuthor.author_id == Author.id)
            .where(BookAuthor.book_id == book_id)
            .order_by(Author.last_name, Author.first_name, Author.id)
        )
        return self._session.scalars(stmt).all()
