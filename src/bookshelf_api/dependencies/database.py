from collections.abc import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from bookshelf_api.database import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db_session(request: Request) -> Iterator[Session]:
    session = get_database(request).session()
    try:
        yield session
    finally:
        session.close()
