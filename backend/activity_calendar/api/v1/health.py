from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from activity_calendar.api.deps import SettingsDep

router = APIRouter()


@router.get("/healthz", response_class=PlainTextResponse, summary="Health check", tags=["health"])
def read_health() -> str:
    """Liveness probe."""
    return "ok"


@router.get("/", response_class=PlainTextResponse, summary="Status banner", tags=["health"])
def read_banner(settings: SettingsDep) -> str:
    return f"{settings.PROJECT_NAME} is up and running."
