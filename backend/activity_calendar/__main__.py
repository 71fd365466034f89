import uvicorn

from activity_calendar.core.config import settings


def main() -> None:
    uvicorn.run(
        "activity_calendar.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
