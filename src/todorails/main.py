from __future__ import annotations

import uvicorn

from .env import get_settings
from .logging_config import setup_logging


def main() -> None:
    """Main entry point for the TodoRails API."""

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"Database: {settings.database_url}")
    print(f"API will be available at: http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation: http://{settings.api_host}:{settings.api_port}/docs")

    # Uvicorn doesn't support multiple workers with reload; "auto" picks uvloop
    # when it is installed.
    reload = settings.api_debug
    workers = 1 if reload else settings.api_workers

    uvicorn.run(
        "todorails.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        workers=workers,
        log_level=settings.log_level.lower(),
        loop="auto",
    )


if __name__ == "__main__":
    main()
