class BookshelfError(Exception):
    """Base exception for all domain errors raised by the services."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(BookshelfError):
    """Raised when an author or book cannot be found by its key."""

    pass


class ConflictError(BookshelfError):
    """Raised when creating an entity or link that already exists."""

    pass


class NotRelatedError(BookshelfError):
    """Raised when removing a link between a book and an author that are not linked."""

    pass


class UpdateFailedError(BookshelfError):
    """Raised when a partial update did not touch any row."""

    pass
