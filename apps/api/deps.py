from fastapi import Request

from core.config import Settings
from core.extract.base import BaseDocxExtractor
from core.store import DocumentStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_extractor(request: Request) -> BaseDocxExtractor:
    return request.app.state.extractor
