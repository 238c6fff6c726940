"""Run the API with uvicorn

Usage:
    teaching-server
    python -m teaching_app.main
"""
import uvicorn

from teaching_app.core.config import settings


def main() -> None:
    uvicorn.run("teaching_app:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
