"""
Local filesystem adapter for stored documents.

Implements FileStoragePort. Files live flat in one directory and are
named ``<file_id>.pdf``; the id is a UUID so it cannot escape the
directory.
"""

import logging
from pathlib import Path
from uuid import UUID

from bodyguard.domain.files.entities import StoredFile
from bodyguard.domain.files.errors import StoredFileNotFoundError
from bodyguard.domain.files.ports import FileStoragePort

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"
PDF_MEDIA_TYPE = "application/pdf"


class LocalFileStorageAdapter(FileStoragePort):
    """Serves PDF documents from a local directory.

    Args:
        root: Directory holding the documents.
        download_name: File name suggested to clients for every download.
    """

    def __init__(self, root: Path, download_name: str = "document.pdf") -> None:
        self._root = Path(root)
        self._download_name = download_name

    def locate(self, file_id: UUID) -> StoredFile:
        path = self._root / f"{file_id}{PDF_SUFFIX}"
        if not path.is_file():
            logger.info("Stored file missing: %s", path.name)
            raise StoredFileNotFoundError(file_id)
        return StoredFile(
            file_id=file_id,
            path=path,
            download_name=self._download_name,
            media_type=PDF_MEDIA_TYPE,
        )
