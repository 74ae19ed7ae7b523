from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def root():
    return f"{settings.SERVICE_NAME} running."


@router.get("/healthz")
def healthz():
    return {
        "ok": True,
        "service": settings.SERVICE_NAME,
        "port": settings.PORT,
        "time": datetime.now(timezone.utc).isoformat(),
    }
