"""
Use case: Resolve a stored document for download.

Input: DownloadFileQuery
Output: StoredFile
Side effects: None.
Failure cases: StoredFileNotFoundError.
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from bodyguard.domain.files.entities import StoredFile
from bodyguard.domain.files.ports import FileStoragePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadFileQuery:
    """Input DTO for a download request."""

    file_id: UUID


class DownloadFileUseCase:
    """Looks up a stored file through the storage port."""

    def __init__(self, storage: FileStoragePort) -> None:
        self._storage = storage

    def execute(self, query: DownloadFileQuery) -> StoredFile:
        logger.info("Download requested for file_id=%s", query.file_id)
        return self._storage.locate(query.file_id)
