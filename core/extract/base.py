from abc import ABC, abstractmethod
from pathlib import Path


class BaseDocxExtractor(ABC):
    """Contract for all .docx text extraction adapters."""

    @abstractmethod
    def extract(self, path: Path) -> str:
        """Extract plain text from the .docx file at `path`.

        Raises:
            ExtractionFailed: if the file cannot be parsed for any reason.
        """
