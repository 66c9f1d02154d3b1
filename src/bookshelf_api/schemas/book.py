from datetime import datetime
from typing import ClassVar

from pydantic import ConfigDict, Field

from bookshelf_api.domain import BookId, Isbn
from bookshelf_api.schemas.common import CamelModel, PartialUpdate


class BookCreate(CamelModel):
    isbn: Isbn = Field(description="ISBN of the book", examples=["978-3-16-148410-0"])
    title: str = Field(min_length=1, examples=["Adventures of Huckleberry Finn"])
    pages: int = Field(gt=0, description="Total number of pages", examples=[366])
    published: int = Field(description="Year of publication", examples=[1884])
    image: str = Field(
        min_length=1,
        description="URL of the book cover image",
        examples=["https://example.com/book-cover.jpg"],
    )


class BookUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("isbn", "title", "pages", "published")

    isbn: Isbn | None = None
    title: str | None = Field(default=None, min_length=1)
    pages: int | None = Field(default=None, gt=0)
    published: int | None = None
    image: str | None = None


class BookRead(CamelModel):
    id: BookId
    isbn: str
    title: str
    pages: int
    published: int
    image: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class BookListResponse(CamelModel):
    books: list[BookRead]


class BookResponse(CamelModel):
    book: BookRead
