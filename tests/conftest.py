import io
from pathlib import Path

import pytest
from docx import Document
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.api.main import create_app
from apps.api.utils.uploads import DOCX_MIME_TYPE
from core.config import Settings

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def make_docx_bytes(*paragraphs: str, table: list[list[str]] | None = None) -> bytes:
    """Build a small .docx in memory with the given paragraphs and optional table."""
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    if table:
        t = doc.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                t.cell(r, c).text = value
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def upload(client: TestClient, data: bytes, filename: str = "hello.docx", content_type: str = DOCX_MIME_TYPE):
    return client.post("/upload-word", files={"document": (filename, data, content_type)})


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def hello_docx_bytes() -> bytes:
    return make_docx_bytes("hello world")


@pytest.fixture()
def hello_docx_path(tmp_path: Path, hello_docx_bytes: bytes) -> Path:
    path = tmp_path / "hello.docx"
    path.write_bytes(hello_docx_bytes)
    return path


@pytest.fixture()
def app_settings(tmp_path: Path) -> Settings:
    return Settings(
        upload_dir=str(tmp_path / "uploads"),
        openapi_yaml_path=str(PROJECT_ROOT / "openapi.yaml"),
        static_dir=str(tmp_path / "static"),
    )


@pytest.fixture()
def upload_dir(app_settings: Settings) -> Path:
    return Path(app_settings.upload_dir)


@pytest.fixture()
def app(app_settings: Settings) -> FastAPI:
    return create_app(app_settings)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
