from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookshelf_api.dependencies.books import get_book_service
from bookshelf_api.domain import AuthorId, BookId
from bookshelf_api.schemas.author import AuthorCreate, AuthorRead
from bookshelf_api.schemas.book import BookCreate, BookListResponse, BookResponse, BookUpdate
from bookshelf_api.schemas.common import MessageResponse
from bookshelf_api.services.book_service import BookService

router = APIRouter(prefix="/books", tags=["books"])

_NOT_FOUND = {404: {"model": MessageResponse, "description": "Book not found"}}
_BAD_REQUEST = {400: {"description": "Validation error or conflicting data"}}


@router.get("", response_model=BookListResponse, summary="Retrieve a list of books")
def list_books(svc: Annotated[BookService, Depends(get_book_service)]) -> BookListResponse:
    return BookListResponse(books=svc.list_books())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    summary="Create new book",
    responses=_BAD_REQUEST,
)
def create_book(
    payload: BookCreate,
    svc: Annotated[BookService, Depends(get_book_service)],
) -> MessageResponse:
    """Fails with 400 if the ISBN is already taken."""
    svc.create_book(payload)
    return MessageResponse(message="Book successfully created")


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    responses=_NOT_FOUND,
)
def get_book(
    book_id: BookId,
    svc: Annotated[BookService, Depends(get_book_service)],
) -> BookResponse:
    return BookResponse(book=svc.get_book(book_id))


@router.put(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Update an existing book",
    description="Only fields present in the body are written.",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_book(
    book_id: BookId,
    payload: BookUpdate,
    svc: Annotated[BookService, Depends(get_book_service)],
) -> MessageResponse:
    svc.update_book(book_id, payload)
    return MessageResponse(message="Book successfully updated")


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Remove existing book",
    responses=_NOT_FOUND,
)
def delete_book(
    book_id: BookId,
    svc: Annotated[BookService, Depends(get_book_service)],
) -> MessageResponse:
    svc.delete_book(book_id)
    return MessageResponse(message="Book successfully deleted")


@router.get(
    "/{book_id}/authors",
    response_model=list[AuthorRead],
    summary="Retrieve a list of authors for a specific book",
    responses=_NOT_FOUND,
)
def list_book_authors(
    book_id: BookId,
    svc: Annotated[BookService, Depends(get_book_service)],
) -> list[AuthorRead]:
    return svc.list_authors(book_id)


@router.post(
    "/{book_id}/authors",
    response_model=MessageResponse,
    summary="Add an author to a specific book",
    description=(
        "Looks the author up by first name, last name and date of birth. "
        "An unknown author is created; an existing author is linked to the book."
    ),
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def add_book_author(
    book_id: BookId,
    payload: AuthorCreate,
    svc: Annotated[BookService, Depends(get_book_service)],
) -> MessageResponse:
    svc.add_author(book_id, payload)
    return MessageResponse(message="Author added to the book successfully")


@router.delete(
    "/{book_id}/authors/{author_id}",
    response_model=MessageResponse,
    summary="Remove an author from a specific book",
    responses={
        404: {"model": MessageResponse, "description": "Book or author not found"},
        400: {"model": MessageResponse, "description": "Book is not related to this author"},
    },
)
def remove_book_author(
    book_id: BookId,
    author_id: AuthorId,
    svc: Annotated[BookService, Depends(get_book_service)],
) -> MessageResponse:
    svc.remove_author(book_id, author_id)
    return MessageResponse(message="Author removed from the book successfully")
