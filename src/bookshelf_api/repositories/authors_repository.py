from collections.abc import Sequence
from datetime import date
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from bookshelf_api.domain import AuthorId
from bookshelf_api.models import Author


class AuthorsRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_authors(self) -> Sequence[Author]:
        return self.session.scalars(select(Author).order_by(Author.created_at, Author.id)).all()

    def get_by_id(self, author_id: AuthorId) -> Author | None:
        return self.session.get(Author, author_id)

    def find_by_identity(self, first_name: str, last_name: str, dob: date) -> Author | None:
        stmt = select(Author).where(
            Author.first_name == first_name,
            Author.last_name == last_name,
            Author.dob == dob,
        )
        return self.session.scalars(stmt).first()

    def create(
        self,
        id: AuthorId,
        first_name: str,
        last_name: str,
        dob: date,
        image: str | None = None,
        commit: bool = True,
    ) -> Author:
        author = Author(id=id, first_name=first_name, last_name=last_name, dob=dob, image=image)
        self.session.add(author)
        if commit:
            self.session.commit()
            self.session.refresh(author)
        else:
            self.session.flush()

        return author

    def update_fields(self, author_id: AuthorId, fields: dict[str, Any]) -> int:
        """
        Writes only the given columns and returns the number of rows affected.
        """
        if not fields:
            return 0

        stmt = update(Author).where(Author.id == author_id).values(**fields)
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        self.session.commit()

        return max(getattr(result, "rowcount", 0), 0)

    def delete(self, author: Author) -> None:
        # the ORM removes book_authors rows for the secondary relationship
        self.session.delete(author)
        self.session.commit()
