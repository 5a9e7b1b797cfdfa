from typing import Any

from fastapi.responses import JSONResponse

from core.errors import DocumentServiceError


def ok(data: Any = None, message: str | None = None) -> dict:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def error_response(exc: DocumentServiceError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message, "error": exc.kind},
    )
