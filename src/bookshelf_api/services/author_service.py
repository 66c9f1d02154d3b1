import logging
from uuid import uuid4

from bookshelf_api.domain import AuthorId, BookId
from bookshelf_api.errors import ConflictError, NotFoundError, NotRelatedError, UpdateFailedError
from bookshelf_api.models import Author
from bookshelf_api.repositories.authors_repository import AuthorsRepository
from bookshelf_api.repositories.book_authors_repository import BookAuthorsRepository
from bookshelf_api.repositories.books_repository import BooksRepository
from bookshelf_api.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate
from bookshelf_api.schemas.book import BookCreate, BookRead

logger = logging.getLogger(__name__)

AUTHOR_NOT_FOUND = "Author not found"
BOOK_NOT_FOUND = "Book not found"
AUTHOR_EXISTS = "Author already exists"


class AuthorService:
    def __init__(
        self,
        authors: AuthorsRepository,
        books: BooksRepository,
        links: BookAuthorsRepository,
    ) -> None:
        self.authors = authors
        self.books = books
        self.links = links

    def _get_or_raise(self, author_id: AuthorId) -> Author:
        author = self.authors.get_by_id(author_id)
        if author is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)
        return author

    def list_authors(self) -> list[AuthorRead]:
        return [AuthorRead.model_validate(a) for a in self.authors.list_authors()]

    def create_author(self, payload: AuthorCreate) -> AuthorRead:
        existing = self.authors.find_by_identity(payload.first_name, payload.last_name, payload.dob)
        if existing is not None:
            raise ConflictError(AUTHOR_EXISTS)

        # TOCTOU: the identity triple has no unique constraint, two concurrent
        # creates can both pass the check above
        author = self.authors.create(
            id=AuthorId(str(uuid4())),
            first_name=payload.first_name,
            last_name=payload.last_name,
            dob=payload.dob,
            image=payload.image,
        )
        logger.info("Author created author_id=%s", author.id)
        return AuthorRead.model_validate(author)

    def get_author(self, author_id: AuthorId) -> AuthorRead:
        return AuthorRead.model_validate(self._get_or_raise(author_id))

    def update_author(self, author_id: AuthorId, patch: AuthorUpdate) -> AuthorRead:
        author = self._get_or_raise(author_id)
        changes = patch.changes()

        identity_fields = {"first_name", "last_name", "dob"}
        if identity_fields & changes.keys():
            duplicate = self.authors.find_by_identity(
                changes.get("first_name", author.first_name),
                changes.get("last_name", author.last_name),
                changes.get("dob", author.dob),
            )
            if duplicate is not None and duplicate.id != author.id:
                raise ConflictError(AUTHOR_EXISTS)

        updated = self.authors.update_fields(author_id, changes)
        if not updated:
            raise UpdateFailedError("Author update failed")

        logger.info("Author updated author_id=%s fields=%s", author_id, sorted(changes))
        return AuthorRead.model_validate(self._get_or_raise(author_id))

    def delete_author(self, author_id: AuthorId) -> None:
        author = self._get_or_raise(author_id)
        self.authors.delete(author)
        logger.info("Author deleted author_id=%s", author_id)

    def list_books(self, author_id: AuthorId) -> list[BookRead]:
        self._get_or_raise(author_id)
        return [BookRead.model_validate(b) for b in self.links.list_books_for_author(author_id)]

    def add_book(self, author_id: AuthorId, payload: BookCreate) -> BookRead:
        """
        Links a book, looked up by ISBN, to the author.

        An unknown ISBN creates the book first; creation and link commit together.
        An existing book is linked as-is and the rest of the payload is ignored.
        """
        author = self._get_or_raise(author_id)

        book = self.books.get_by_isbn(payload.isbn)
        if book is None:
            book = self.books.create(
                isbn=payload.isbn,
                title=payload.title,
                pages=payload.pages,
                published=payload.published,
                image=payload.image,
                commit=False,
            )
            logger.info("Book created book_id=%s isbn=%s", book.id, book.isbn)

        book_id = BookId(book.id)
        if not self.links.add_link(book_id=book_id, author_id=AuthorId(author.id)):
            raise ConflictError("Book is already added to the author")

        logger.info("Book linked to author author_id=%s book_id=%s", author_id, book_id)
        return BookRead.model_validate(self.books.get_by_id(book_id))

    def remove_book(self, author_id: AuthorId, book_id: BookId) -> None:
        self._get_or_raise(author_id)
        if self.books.get_by_id(book_id) is None:
            raise NotFoundError(BOOK_NOT_FOUND)

        if not self.links.remove_link(book_id=book_id, author_id=author_id):
            raise NotRelatedError("Author is not related with this book")

        logger.info("Book unlinked from author author_id=%s book_id=%s", author_id, book_id)
