"""
Custom exceptions for the application.
"""


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class NotFoundError(RepositoryError):
    """Raised when the requested todo or label does not exist."""

    def __init__(self, id: int):
        self.id = id
        super().__init__(f"Not found id: {id}")


class UnexpectedError(RepositoryError):
    """Raised when the backing store fails for any other reason."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Unexpected error: {detail}")
