import secrets
from pathlib import Path

import anyio
import anyio.to_thread
from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from apps.api.deps import get_extractor, get_settings, get_store
from apps.api.utils.responses import ok
from apps.api.utils.uploads import is_word_document, save_upload, storage_suffix
from core.config import Settings
from core.errors import DeletionFailed, DocumentNotFound, ExtractionFailed, InvalidFileType, NoFileUploaded
from core.extract.base import BaseDocxExtractor
from core.logging_config import logger
from core.models.document import DocumentRecord
from core.store import DocumentStore

router = APIRouter()


def new_document_id() -> str:
    # 128 random bits
    return secrets.token_hex(16)


async def _extract_text(extractor: BaseDocxExtractor, path: Path, timeout: float) -> str:
    # the worker thread is abandoned on timeout, not interrupted
    try:
        with anyio.fail_after(timeout):
            return await anyio.to_thread.run_sync(extractor.extract, path, abandon_on_cancel=True)
    except TimeoutError:
        raise ExtractionFailed(f"extraction timed out after {timeout:g}s")


@router.post("/upload-word")
async def upload_word(
    document: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
    store: DocumentStore = Depends(get_store),
    extractor: BaseDocxExtractor = Depends(get_extractor),
):
    if document is None:
        raise NoFileUploaded("Please choose a Word document to upload")
    if not is_word_document(document.filename, document.content_type):
        logger.warning(f"Rejected upload '{document.filename}' ({document.content_type})")
        raise InvalidFileType("Only .docx Word documents are supported")

    doc_id = new_document_id()
    dest = Path(settings.upload_dir) / f"{doc_id}{storage_suffix(document.filename)}"
    size = await save_upload(document, dest, settings.max_upload_bytes)

    # the stored file survives only a successful insert (or a kept failure)
    keep_file = False
    try:
        try:
            content = await _extract_text(extractor, dest, settings.extraction_timeout_seconds)
        except ExtractionFailed as exc:
            logger.error(f"Extraction failed for {doc_id} ('{document.filename}'): {exc.message}", exc_info=exc)
            keep_file = settings.keep_failed_uploads
            raise ExtractionFailed(f"Document processing failed: {exc.message}") from exc

        record = DocumentRecord.create(doc_id, document.filename or dest.name, content, dest)
        store.insert(record)
        keep_file = True
    finally:
        if not keep_file:
            await run_in_threadpool(dest.unlink, True)

    logger.info(f"Stored document {doc_id} ('{record.original_filename}', {size} bytes, {record.word_count} words)")
    return ok(record.to_public(), message="Word document uploaded successfully")


@router.get("/get-document/{file_id}")
def get_document(file_id: str, store: DocumentStore = Depends(get_store)):
    record = store.get(file_id)
    if record is None:
        raise DocumentNotFound("Document not found")
    return ok(record.to_public())


@router.get("/documents")
def list_documents(store: DocumentStore = Depends(get_store)):
    return ok([r.to_summary() for r in store.list()])


@router.delete("/delete-document/{file_id}")
async def delete_document(file_id: str, request: Request, store: DocumentStore = Depends(get_store)):
    async with request.app.state.delete_lock:
        record = store.get(file_id)
        if record is None:
            raise DocumentNotFound("Document not found")

        try:
            await run_in_threadpool(record.storage_path.unlink)
        except OSError as exc:
            logger.error(f"Failed to delete file for {file_id}: {exc}")
            raise DeletionFailed(f"Failed to delete document: {exc}") from exc

        store.delete(file_id)

    logger.info(f"Deleted document {file_id}")
    return ok(message="Document deleted successfully")
