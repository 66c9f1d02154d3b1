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
from bookshelf_api.services.book_service import BookService


def get_book_service(
    books: Annotated[BooksRepository, Depends(get_books_repository)],
    authors: Annotated[AuthorsRepository, Depends(get_authors_repository)],
    links: Annotated[BookAuthorsRepository, Depends(get_book_authors_repository)],
) -> BookService:
    return BookService(books=books, authors=authors, links=links)
