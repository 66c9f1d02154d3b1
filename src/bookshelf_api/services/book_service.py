import logging
from uuid import uuid4

from bookshelf_api.domain import AuthorId, BookId
from bookshelf_api.errors import ConflictError, NotFoundError, NotRelatedError, UpdateFailedError
from bookshelf_api.models import Book
from bookshelf_api.repositories.authors_repository import AuthorsRepository
from bookshelf_api.repositories.book_authors_repository import BookAuthorsRepository
from bookshelf_api.repositories.books_repository import BooksRepository
from bookshelf_api.schemas.author import AuthorCreate, AuthorRead
from bookshelf_api.schemas.book import BookCreate, BookRead, BookUpdate

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found"
AUTHOR_NOT_FOUND = "Author not found"
ISBN_EXISTS = "ISBN Already exists"


class BookService:
    def __init__(
        self,
        books: BooksRepository,
        authors: AuthorsRepository,
        links: BookAuthorsRepository,
    ) -> None:
        self.books = books
        self.authors = authors
        self.links = links

    def _get_or_raise(self, book_id: BookId) -> Book:
        book = self.books.get_by_id(book_id)
        if book is None:
            raise NotFoundError(BOOK_NOT_FOUND)
        return book

    def list_books(self) -> list[BookRead]:
        return [BookRead.model_validate(b) for b in self.books.list_books()]

    def create_book(self, payload: BookCreate) -> BookRead:
        if self.books.get_by_isbn(payload.isbn) is not None:
            raise ConflictError(ISBN_EXISTS)

        book = self.books.create(
            isbn=payload.isbn,
            title=payload.title,
            pages=payload.pages,
            published=payload.published,
            image=payload.image,
        )
        logger.info("Book created book_id=%s isbn=%s", book.id, book.isbn)
        return BookRead.model_validate(book)

    def get_book(self, book_id: BookId) -> BookRead:
        return BookRead.model_validate(self._get_or_raise(book_id))

    def update_book(self, book_id: BookId, patch: BookUpdate) -> BookRead:
        book = self._get_or_raise(book_id)
        changes = patch.changes()

        new_isbn = changes.get("isbn")
        if new_isbn is not None and new_isbn != book.isbn:
            if self.books.get_by_isbn(new_isbn) is not None:
                raise ConflictError(ISBN_EXISTS)

        updated = self.books.update_fields(book_id, changes)
        if not updated:
            raise UpdateFailedError("Update failed")

        logger.info("Book updated book_id=%s fields=%s", book_id, sorted(changes))
        return BookRead.model_validate(self._get_or_raise(book_id))

    def delete_book(self, book_id: BookId) -> None:
        book = self._get_or_raise(book_id)
        self.books.delete(book)
        logger.info("Book deleted book_id=%s", book_id)

    def list_authors(self, book_id: BookId) -> list[AuthorRead]:
        self._get_or_raise(book_id)
        return [AuthorRead.model_validate(a) for a in self.links.list_authors_for_book(book_id)]

    def add_author(self, book_id: BookId, payload: AuthorCreate) -> AuthorRead:
        """
        Links an author, looked up by (first name, last name, date of birth), to the book.

        An unknown author is created first; creation and link commit together.
        """
        book = self._get_or_raise(book_id)

        author = self.authors.find_by_identity(payload.first_name, payload.last_name, payload.dob)
        if author is None:
            author = self.authors.create(
                id=AuthorId(str(uuid4())),
                first_name=payload.first_name,
                last_name=payload.last_name,
                dob=payload.dob,
                image=payload.image,
                commit=False,
            )
            logger.info("Author created author_id=%s", author.id)

        author_id = AuthorId(author.id)
        if not self.links.add_link(book_id=BookId(book.id), author_id=author_id):
            raise ConflictError("Author is already added to the book")

        logger.info("Author linked to book book_id=%s author_id=%s", book_id, author_id)
        return AuthorRead.model_validate(self.authors.get_by_id(author_id))

    def remove_author(self, book_id: BookId, author_id: AuthorId) -> None:
        self._get_or_raise(book_id)
        if self.authors.get_by_id(author_id) is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)

        if not self.links.remove_link(book_id=book_id, author_id=author_id):
            raise NotRelatedError("Book is not related with this author")

        logger.info("Author unlinked from book book_id=%s author_id=%s", book_id, author_id)
