"""Document store.

The default backend is a process-local dict: unbounded, and lost on restart.
Handlers only talk to the `DocumentStore` interface so another backend can
be swapped in through `create_app`.
"""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from core.models.document import DocumentRecord


class DocumentStore(ABC):
    """Contract for document record storage."""

    @abstractmethod
    def insert(self, record: DocumentRecord) -> None:
        """Add a record. Raises ValueError if the id is already present."""

    @abstractmethod
    def get(self, doc_id: str) -> DocumentRecord | None:
        """Return the record for `doc_id`, or None."""

    @abstractmethod
    def list(self) -> list[DocumentRecord]:
        """Return all records in insertion order."""

    @abstractmethod
    def delete(self, doc_id: str) -> DocumentRecord | None:
        """Remove and return the record for `doc_id`, or None if absent."""

    @abstractmethod
    def __len__(self) -> int: ...


class InMemoryDocumentStore(DocumentStore):
    def __init__(self) -> None:
        self._records: dict[str, DocumentRecord] = {}
        self._lock = threading.Lock()

    def insert(self, record: DocumentRecord) -> None:
        with self._lock:
            if record.id in self._records:
                raise ValueError(f"Duplicate document id: {record.id}")
            self._records[record.id] = record

    def get(self, doc_id: str) -> DocumentRecord | None:
        with self._lock:
            return self._records.get(doc_id)

    def list(self) -> list[DocumentRecord]:
        with self._lock:
            return list(self._records.values())

    def delete(self, doc_id: str) -> DocumentRecord | None:
        with self._lock:
            return self._records.pop(doc_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
