"""
Domain-specific errors for the files bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from uuid import UUID


class FileDomainError(Exception):
    """Base error for all files domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class StoredFileNotFoundError(FileDomainError):
    """Raised when no stored file has the requested id."""

    def __init__(self, file_id: UUID) -> None:
        super().__init__(f"File not found: {file_id}")
        self.file_id = file_id
