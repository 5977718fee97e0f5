"""Custom application-wide exceptions."""

from typing import Any


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class ValidationError(ApplicationError):
    """Exception raised for malformed or missing input. Nothing is written when it is raised."""

    def __init__(self, message: str = "Invalid input", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"Validation Error: {message}"


class StoreError(ApplicationError):
    """Exception raised when a document store operation fails."""

    def __init__(
        self,
        message: str = "Document store operation failed",
        original_exception: Exception | None = None,
        collection: str | None = None,
        doc_id: str | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.collection = collection
        self.doc_id = doc_id
        self.message = f"Store Error: {message}"


class SaveError(ApplicationError):
    """
    Exception raised when a reconciliation save aborts.

    Writes issued before the failure stay persisted; `report` describes them.
    """

    def __init__(self, message: str = "Save failed", cause: StoreError | None = None, report: Any = None) -> None:
        super().__init__(message, cause)
        self.cause = cause
        self.report = report
        self.message = f"Save Error: {message}"


class ReadError(ApplicationError):
    """Exception raised when reading persisted stock back fails."""

    def __init__(self, message: str = "Read failed", cause: Exception | None = None) -> None:
        super().__init__(message, cause)
        self.cause = cause
        self.message = f"Read Error: {message}"
