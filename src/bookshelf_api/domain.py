import typing
from typing import Annotated

from pydantic import Field

if typing.TYPE_CHECKING:
    AuthorId = typing.NewType("AuthorId", str)
    BookId = typing.NewType("BookId", int)
    Isbn = typing.NewType("Isbn", str)
else:
    _AuthorIdStr = Annotated[str, Field(min_length=1)]
    AuthorId = typing.NewType("AuthorId", _AuthorIdStr)

    BookId = typing.NewType("BookId", int)

    _IsbnStr = Annotated[str, Field(min_length=1, max_length=32)]
    Isbn = typing.NewType("Isbn", _IsbnStr)
