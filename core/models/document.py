from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_utc(ts: datetime) -> str:
    # 2024-05-01T12:30:00.123Z
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in the trimmed text."""
    return len((text or "").split())


@dataclass(frozen=True)
class DocumentRecord:
    id: str
    original_filename: str
    content: str
    word_count: int
    storage_path: Path
    uploaded_at: datetime = field(default_factory=utc_now)

    @classmethod
    def create(cls, doc_id: str, original_filename: str, content: str, storage_path: Path) -> DocumentRecord:
        return cls(
            id=doc_id,
            original_filename=original_filename,
            content=content,
            word_count=count_words(content),
            storage_path=storage_path,
        )

    def to_summary(self) -> dict:
        return {
            "fileId": self.id,
            "filename": self.original_filename,
            "wordCount": self.word_count,
            "uploadTime": isoformat_utc(self.uploaded_at),
        }

    def to_public(self) -> dict:
        return {
            "fileId": self.id,
            "filename": self.original_filename,
            "content": self.content,
            "wordCount": self.word_count,
            "uploadTime": isoformat_utc(self.uploaded_at),
        }
