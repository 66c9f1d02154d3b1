from bookshelf_api.schemas.author import (
    AuthorCreate,
    AuthorListResponse,
    AuthorRead,
    AuthorResponse,
    AuthorUpdate,
)
from bookshelf_api.schemas.book import (
    BookCreate,
    BookListResponse,
    BookRead,
    BookResponse,
    BookUpdate,
)
from bookshelf_api.schemas.common import MessageResponse

__all__ = [
    "AuthorCreate",
    "AuthorListResponse",
    "AuthorRead",
    "AuthorResponse",
    "AuthorUpdate",
    "BookCreate",
    "BookListResponse",
    "BookRead",
    "BookResponse",
    "BookUpdate",
    "MessageResponse",
]
