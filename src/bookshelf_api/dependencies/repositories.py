from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bookshelf_api.dependencies.database import get_db_session
from bookshelf_api.repositories.authors_repository import AuthorsRepository
from bookshelf_api.repositories.book_authors_repository import BookAuthorsRepository
from bookshelf_api.repositories.books_repository import BooksRepository


def get_authors_repository(
    session: Annotated[Session, Depends(get_db_session)],
) -> AuthorsRepository:
    return AuthorsRepository(session=session)


def get_books_repository(session: Annotated[Session, Depends(get_db_session)]) -> BooksRepository:
    return BooksRepository(session=session)


def get_book_authors_repository(
    session: Annotated[Session, Depends(get_db_session)],
) -> BookAuthorsRepository:
    return BookAuthorsRepository(session=session)
