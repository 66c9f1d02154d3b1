from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookshelf_api import models  # noqa: F401
from bookshelf_api.config import Settings
from bookshelf_api.database import Base, enable_sqlite_foreign_keys
from bookshelf_api.dependencies.database import get_db_session
from bookshelf_api.main import create_app
from bookshelf_api.repositories.authors_repository import AuthorsRepository
from bookshelf_api.repositories.book_authors_repository import BookAuthorsRepository
from bookshelf_api.repositories.books_repository import BooksRepository
from bookshelf_api.services.author_service import AuthorService
from bookshelf_api.services.book_service import BookService


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return create_app(Settings(database_url="sqlite://", log_format="text", _env_file=None))


@pytest.fixture(autouse=True)
def clear_dependency_overrides(app: FastAPI) -> Iterator[None]:
    app.dependency_overrides.clear()
    yield
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def db_engine() -> Engine:
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def db_session(db_engine: Engine) -> Iterator[Session]:
    connection = db_engine.connect()
    transaction = connection.begin()
    session_factory = sessionmaker(bind=connection)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture
def authors_repo(db_session: Session) -> AuthorsRepository:
    return AuthorsRepository(session=db_session)


@pytest.fixture
def books_repo(db_session: Session) -> BooksRepository:
    return BooksRepository(session=db_session)


@pytest.fixture
def links_repo(db_session: Session) -> BookAuthorsRepository:
    return BookAuthorsRepository(session=db_session)


@pytest.fixture
def author_service(
    authors_repo: AuthorsRepository,
    books_repo: BooksRepository,
    links_repo: BookAuthorsRepository,
) -> AuthorService:
    return AuthorService(authors=authors_repo, books=books_repo, links=links_repo)


@pytest.fixture
def book_service(
    books_repo: BooksRepository,
    authors_repo: AuthorsRepository,
    links_repo: BookAuthorsRepository,
) -> BookService:
    return BookService(books=books_repo, authors=authors_repo, links=links_repo)


@pytest.fixture
def client(app: FastAPI, db_session: Session) -> Iterator[TestClient]:
    def override_get_db_session() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session

    with TestClient(app) as test_client:
        yield test_client
