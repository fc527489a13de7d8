"""
Domain entities for the files bounded context.
"""

from dataclasses import dataclass
from pathlib import Path
from uuid import UUID


@dataclass(frozen=True)
class StoredFile:
    """A document held in storage.

    Attributes:
        file_id: Storage identifier.
        path: Location of the file content.
        download_name: File name suggested to the client.
        media_type: MIME type sent with the content.
    """

    file_id: UUID
    path: Path
    download_name: str
    media_type: str = "application/pdf"
