import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from activity_calendar import __version__
from activity_calendar.api.router import api_router, asset_router, root_router
from activity_calendar.core.cache import ListingCache
from activity_calendar.core.config import Settings, settings as default_settings
from activity_calendar.core.exceptions import ActivityCalendarError
from activity_calendar.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(title=settings.PROJECT_NAME, version=__version__)
    app.state.settings = settings
    app.state.listing_cache = ListingCache(
        ttl=settings.LISTING_CACHE_TTL,
        url=settings.REDIS_CACHE_URL,
    )

    # Read-only API: GET plus preflight from the configured frontend origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"[REQUEST] {request.method} {request.url.path}")
        response = await call_next(request)
        logger.info(f"[RESPONSE] {response.status_code} for {request.method} {request.url.path}")
        return response

    def get_cors_headers(request: Request) -> dict:
        """CORS headers for responses built outside the CORS middleware."""
        origin = request.headers.get("origin")
        if "*" in settings.cors_origins:
            return {"Access-Control-Allow-Origin": "*"}
        if origin and origin in settings.cors_origins:
            return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
        return {}

    @app.exception_handler(ActivityCalendarError)
    async def activity_calendar_exception_handler(request: Request, exc: ActivityCalendarError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{request.method} {request.url.path} failed "
            f"(participant={exc.participant!r}): {exc.message}"
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        messages = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"error": messages},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception for {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
            headers=get_cors_headers(request),
        )

    app.include_router(api_router, prefix=settings.API_STR)
    app.include_router(asset_router)
    app.include_router(root_router)

    logger.info(f"Serving participants from {settings.PARTICIPANTS_DIR}")
    return app


app = create_application()
