from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookshelf_api.dependencies.authors import get_author_service
from bookshelf_api.domain import AuthorId, BookId
from bookshelf_api.schemas.author import (
    AuthorCreate,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdate,
)
from bookshelf_api.schemas.book import BookCreate, BookRead
from bookshelf_api.schemas.common import MessageResponse
from bookshelf_api.services.author_service import AuthorService

router = APIRouter(prefix="/authors", tags=["authors"])

_NOT_FOUND = {404: {"model": MessageResponse, "description": "Author not found"}}
_BAD_REQUEST = {400: {"description": "Validation error or conflicting data"}}


@router.get("", response_model=AuthorListResponse, summary="Retrieve a list of authors")
def list_authors(svc: Annotated[AuthorService, Depends(get_author_service)]) -> AuthorListResponse:
    return AuthorListResponse(authors=svc.list_authors())


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    summary="Create new author",
    responses=_BAD_REQUEST,
)
def create_author(
    payload: AuthorCreate,
    svc: Annotated[AuthorService, Depends(get_author_service)],
) -> MessageResponse:
    """Fails with 400 if an author with the same name and date of birth exists."""
    svc.create_author(payload)
    return MessageResponse(message="Author successfully created")


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    responses=_NOT_FOUND,
)
def get_author(
    author_id: AuthorId,
    svc: Annotated[AuthorService, Depends(get_author_service)],
) -> AuthorResponse:
    return AuthorResponse(author=svc.get_author(author_id))


@router.put(
    "/{author_id}",
    response_model=MessageResponse,
    summary="Update an existing author",
    description="Only fields present in the body are written.",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_author(
    author_id: AuthorId,
    payload: AuthorUpdate,
    svc: Annotated[AuthorService, Depends(get_author_service)],
) -> MessageResponse:
    svc.update_author(author_id, payload)
    return MessageResponse(message="Author successfully updated")


@router.delete(
    "/{author_id}",
    response_model=MessageResponse,
    summary="Remove existing author",
    responses=_NOT_FOUND,
)
def delete_author(
    author_id: AuthorId,
    svc: Annotated[AuthorService, Depends(get_author_service)],
) -> MessageResponse:
    svc.delete_author(author_id)
    return MessageResponse(message="Author successfully deleted")


@router.get(
    "/{author_id}/books",
    response_model=list[BookRead],
    summary="Retrieve a list of books for a specific author",
    responses=_NOT_FOUND,
)
def list_author_books(
    author_id: AuthorId,
    svc: Annotated[AuthorService, Depends(get_author_service)],
) -> list[BookRead]:
    return svc.list_books(author_id)


@router.post(
    "/{author_id}/books",
    response_model=MessageResponse,
    summary="Add a book to a specific author",
    description=(
        "Looks the book up by ISBN. An unknown ISBN creates the book; "
        "an existing book is linked to the author."
    ),
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def add_author_book(
    author_id: AuthorId,
    payload: BookCreate,
    svc: Annotated[AuthorService, Depends(get_author_service)],
) -> MessageResponse:
    svc.add_book(author_id, payload)
    return MessageResponse(message="Book added to the author successfully")


@router.delete(
    "/{author_id}/books/{book_id}",
    response_model=MessageResponse,
    summary="Remove a book from a specific author",
    responses={
        404: {"model": MessageResponse, "description": "Author or book not found"},
        400: {"model": MessageResponse, "description": "Author is not related to this book"},
    },
)
def remove_author_book(
    author_id: AuthorId,
    book_id: BookId,
    svc: Annotated[AuthorService, Depends(get_author_service)],
) -> MessageResponse:
    svc.remove_book(author_id, book_id)
    return MessageResponse(message="Book removed from the author successfully")
