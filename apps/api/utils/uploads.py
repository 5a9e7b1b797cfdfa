from __future__ import annotations

import re
from pathlib import Path

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from core.errors import FileTooLarge

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DEFAULT_SUFFIX = ".docx"
CHUNK_SIZE = 64 * 1024

_SAFE_SUFFIX = re.compile(r"^\.[a-z0-9]{1,10}$")


def is_word_document(filename: str | None, content_type: str | None) -> bool:
    if content_type == DOCX_MIME_TYPE:
        return True
    return (filename or "").lower().endswith(".docx")


def storage_suffix(filename: str | None) -> str:
    """Extension for the stored copy; the client name itself is never used on disk."""
    suffix = Path(filename or "").suffix.lower()
    if _SAFE_SUFFIX.match(suffix):
        return suffix
    return DEFAULT_SUFFIX


def _too_large(max_bytes: int) -> FileTooLarge:
    return FileTooLarge(f"File size exceeds the limit (max {max_bytes // (1024 * 1024)}MB)")


async def save_upload(upload: UploadFile, dest: Path, max_bytes: int) -> int:
    """Stream `upload` into `dest`, returning the number of bytes written.

    Nothing is left at `dest` if the size limit is exceeded.
    """
    if upload.size is not None and upload.size > max_bytes:
        raise _too_large(max_bytes)

    written = 0
    out = await run_in_threadpool(dest.open, "wb")
    try:
        while chunk := await upload.read(CHUNK_SIZE):
            written += len(chunk)
            if written > max_bytes:
                raise _too_large(max_bytes)
            await run_in_threadpool(out.write, chunk)
    except BaseException:
        out.close()
        dest.unlink(missing_ok=True)
        raise
    out.close()
    return written
