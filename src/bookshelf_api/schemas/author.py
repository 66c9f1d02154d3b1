from datetime import date, datetime
from typing import ClassVar

from pydantic import ConfigDict, Field

from bookshelf_api.domain import AuthorId
from bookshelf_api.schemas.common import CamelModel, PartialUpdate


class AuthorCreate(CamelModel):
    first_name: str = Field(
        min_length=1, description="First name of the author", examples=["Mark"]
    )
    last_name: str = Field(
        min_length=1, description="Last name of the author", examples=["Twain"]
    )
    dob: date = Field(description="Date of birth (ISO-8601)", examples=["1835-11-30"])
    image: str = Field(
        min_length=1,
        description="URL of the author's image",
        examples=["https://example.com/images/mark-twain.jpg"],
    )


class AuthorUpdate(PartialUpdate):
    required_fields: ClassVar[tuple[str, ...]] = ("first_name", "last_name", "dob")

    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    dob: date | None = None
    image: str | None = None


class AuthorRead(CamelModel):
    id: AuthorId
    first_name: str
    last_name: str
    dob: date
    image: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class AuthorListResponse(CamelModel):
    authors: list[AuthorRead]


class AuthorResponse(CamelModel):
    author: AuthorRead
