from typing import Annotated

from fastapi import Depends

from bookshelf_api.dependencies.repositories import (
    get_authors_repository,
    get_book_authors_repository,
    get_books_repository,
)
from bookshelf_api.repositories.authors_repository import AuthorsRepository
from bookshelf_api.repositories.book_authors_repository import BookAuthorsRepository
from bookshelf_api.repositories.books_repository import BooksRepository
from bookshelf_api.services.author_service import AuthorService


def get_author_service(
    authors: Annotated[AuthorsRepository, Depends(get_authors_repository)],
    books: Annotated[BooksRepository, Depends(get_books_repository)],
    links: Annotated[BookAuthorsRepository, Depends(get_book_authors_repository)],
) -> AuthorService:
    return AuthorService(authors=authors, books=books, links=links)
