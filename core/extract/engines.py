from core.extract.base import BaseDocxExtractor
from core.extract.python_docx_adapter import PythonDocxAdapter


def create_extractor(engine: str) -> BaseDocxExtractor:
    """Return the extractor for `engine` (case-insensitive)."""
    if engine.lower() == "python-docx":
        return PythonDocxAdapter()
    raise ValueError(f"Unknown docx engine '{engine}'. Supported: python-docx")
