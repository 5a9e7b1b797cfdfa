from fastapi import APIRouter, Depends

from apps.api.deps import get_settings
from core.config import Settings
from core.models.document import isoformat_utc, utc_now

router = APIRouter()


@router.get("/health")
def health():
    return {
        "status": "ok",
        "message": "Word document upload service is running",
        "timestamp": isoformat_utc(utc_now()),
    }


@router.get("/legal")
def legal(settings: Settings = Depends(get_settings)):
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "terms": "This plugin only processes documents; uploaded content is not stored permanently.",
        "privacy": "We do not collect or store any personal information.",
        "contact": settings.contact_email,
    }
