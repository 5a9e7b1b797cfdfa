import asyncio
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from apps.api.routers import documents, health, schema
from apps.api.utils.responses import error_response
from core.config import Settings, settings
from core.errors import DocumentServiceError, InvalidRequest, NoFileUploaded
from core.extract.engines import create_extractor
from core.logging_config import logger, setup_logging
from core.store import DocumentStore, InMemoryDocumentStore


def create_app(app_settings: Settings | None = None, store: DocumentStore | None = None) -> FastAPI:
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level)

    upload_dir = Path(app_settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)

    # our own /openapi.json replaces the generated one
    app = FastAPI(title=app_settings.app_name, version=app_settings.app_version,
                  openapi_url=None, docs_url=None, redoc_url=None)

    app.state.settings = app_settings
    app.state.store = store if store is not None else InMemoryDocumentStore()
    app.state.extractor = create_extractor(app_settings.docx_engine)
    app.state.delete_lock = asyncio.Lock()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DocumentServiceError)
    async def handle_service_error(request: Request, exc: DocumentServiceError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        # a `document` part sent as a plain form field is still "no file"
        if any(tuple(err.get("loc", ())) == ("body", "document") for err in exc.errors()):
            return error_response(NoFileUploaded("Please choose a Word document to upload"))
        logger.warning(f"Invalid request on {request.method} {request.url.path}: {exc.errors()}")
        return error_response(InvalidRequest("Invalid request"))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Internal server error", "error": "InternalError"},
        )

    app.include_router(health.router, tags=["health"])
    app.include_router(schema.router, tags=["schema"])
    app.include_router(documents.router, tags=["documents"])

    static_dir = Path(app_settings.static_dir)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    logger.info(f"Storing uploads in {upload_dir.resolve()}")
    return app


def run() -> None:
    logger.info(f"Word document upload service on http://{settings.host}:{settings.port}")
    uvicorn.run("apps.api.main:create_app", factory=True, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
