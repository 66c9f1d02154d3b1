from datetime import date

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from bookshelf_api.models import Author, Book, BookAuthor


class DataFactory:
    def __init__(self, session: Session):
        self.session = session
        self._seq = 0

    def create_author(
        self,
        id: str | None = None,
        first_name: str = "Mark",
        last_name: str = "Twain",
        dob: date = date(1835, 11, 30),
        **kwargs,
    ) -> Author:
        self._seq += 1
        a = Author(
            id=id or f"00000000-0000-4000-8000-{self._seq:012d}",
            first_name=first_name,
            last_name=last_name,
            dob=dob,
            **kwargs,
        )
        self.session.add(a)
        return a

    def create_book(self, isbn: str, title: str = "Test Book", **kwargs) -> Book:
        kwargs.setdefault("pages", 100)
        kwargs.setdefault("published", 2000)
        b = Book(isbn=isbn, title=title, **kwargs)
        self.session.add(b)
        self.session.flush()
        return b

    def link(self, book: Book, author: Author) -> BookAuthor:
        self.session.flush()
        link = BookAuthor(book_id=book.id, author_id=author.id)
        self.session.add(link)
        return link

    def get_links(self) -> list[BookAuthor]:
        return list(self.session.execute(select(BookAuthor)).scalars().all())

    def commit(self):
        self.session.commit()


@pytest.fixture
def test_data(db_session: Session) -> DataFactory:
    return DataFactory(db_session)


AUTHOR_PAYLOAD = {
    "firstName": "Mark",
    "lastName": "Twain",
    "dob": "1835-11-30",
    "image": "https://example.com/images/mark-twain.jpg",
}

BOOK_PAYLOAD = {
    "isbn": "X1",
    "title": "Adventures of Huckleberry Finn",
    "pages": 366,
    "published": 1884,
    "image": "https://example.com/images/huck-finn.jpg",
}
