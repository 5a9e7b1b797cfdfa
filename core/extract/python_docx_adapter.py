from pathlib import Path

from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph

from core.errors import ExtractionFailed
from core.extract.base import BaseDocxExtractor


class PythonDocxAdapter(BaseDocxExtractor):
    """Extracts raw text from .docx using python-docx.

    Body paragraphs and table cells are read in document order and joined
    by blank lines.
    """

    def extract(self, path: Path) -> str:
        try:
            doc = Document(str(path))
            blocks: list[str] = []
            for item in doc.iter_inner_content():
                if isinstance(item, Paragraph):
                    blocks.append(item.text)
                elif isinstance(item, Table):
                    blocks.extend(_table_text(item))
            return "\n\n".join(blocks)
        except ExtractionFailed:
            raise
        except Exception as exc:
            raise ExtractionFailed(f"python-docx extraction failed: {exc}") from exc


def _table_text(table: Table) -> list[str]:
    texts = []
    for row in table.rows:
        for cell in row.cells:
            texts.extend(p.text for p in cell.paragraphs)
    return texts
