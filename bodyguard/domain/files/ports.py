"""
Port interfaces (ABCs) for the files bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from bodyguard.domain.files.entities import StoredFile


class FileStoragePort(ABC):
    """Port for locating stored documents."""

    @abstractmethod
    def locate(self, file_id: UUID) -> StoredFile:
        """Return the stored file with the given id.

        Raises:
            StoredFileNotFoundError: If no such file exists.
        """
        raise NotImplementedError
