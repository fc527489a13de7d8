"""
FastAPI router for the files bounded context.

Documents are sent as attachments only, never for inline preview.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from bodyguard.application.files.download_file import (
    DownloadFileQuery,
    DownloadFileUseCase,
)
from bodyguard.core.config import settings
from bodyguard.infrastructure.files.local_storage import LocalFileStorageAdapter
from bodyguard.interfaces.payloads.schemas import ErrorResponse

router = APIRouter(prefix="/files", tags=["files"])


def get_download_file_use_case() -> DownloadFileUseCase:
    """Provide the download use case backed by local storage."""
    storage = LocalFileStorageAdapter(
        root=settings.storage_dir, download_name=settings.download_name
    )
    return DownloadFileUseCase(storage)


@router.get(
    "/{file_id}",
    response_class=FileResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Download a document",
    description="Download a stored PDF document as an attachment.",
)
def download_file(
    file_id: UUID,
    use_case: DownloadFileUseCase = Depends(get_download_file_use_case),
) -> FileResponse:
    """Send a stored document as an attachment."""
    stored = use_case.execute(DownloadFileQuery(file_id=file_id))
    return FileResponse(
        stored.path,
        media_type=stored.media_type,
        filename=stored.download_name,
        content_disposition_type="attachment",
    )
