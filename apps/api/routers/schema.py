from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from apps.api.deps import get_settings
from core.config import Settings
from core.errors import SchemaUnavailable
from core.logging_config import logger
from core.openapi_spec import build_openapi_spec

router = APIRouter()


@router.get("/openapi.json")
def openapi_json(request: Request, settings: Settings = Depends(get_settings)):
    base_url = f"{request.url.scheme}://{request.url.netloc}"
    return build_openapi_spec(base_url, version=settings.app_version, contact_email=settings.contact_email)


# Served verbatim: its `servers` block is whatever the file says.
@router.get("/openapi.yaml")
async def openapi_yaml(settings: Settings = Depends(get_settings)):
    path = Path(settings.openapi_yaml_path)
    try:
        content = await run_in_threadpool(path.read_text, "utf-8")
    except OSError as exc:
        logger.error(f"Failed to read {path}: {exc}")
        raise SchemaUnavailable("Unable to provide the YAML OpenAPI description") from exc
    return Response(content=content, media_type="application/x-yaml")
