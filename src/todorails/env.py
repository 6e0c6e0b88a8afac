from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel


class Settings(BaseModel):
    """Typed application settings built from environment variables."""

    # Database settings
    database_url: str = "redis://localhost:6379/0"

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_workers: int = 1
    api_cors_origins: list[str] = ["*"]

    # Application settings
    app_name: str = "TodoRails"
    app_version: str = "1.0.0"

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None


def get_settings() -> Settings:
    """Return typed settings instance sourced from env vars."""
    return Settings(
        database_url=os.environ.get(
            "TODORAILS_DATABASE_URL", "redis://localhost:6379/0"
        ),
        api_host=os.environ.get("TODORAILS_API_HOST", "0.0.0.0"),
        api_port=int(os.environ.get("TODORAILS_API_PORT", "8000")),
        api_debug=os.environ.get("TODORAILS_API_DEBUG", "false").lower() == "true",
        api_workers=int(os.environ.get("TODORAILS_API_WORKERS", "1")),
        api_cors_origins=os.environ.get("TODORAILS_API_CORS_ORIGINS", "*").split(","),
        app_name=os.environ.get("TODORAILS_APP_NAME", "TodoRails"),
        app_version=os.environ.get("TODORAILS_APP_VERSION", "1.0.0"),
        log_level=os.environ.get("TODORAILS_LOG_LEVEL", "INFO"),
        log_file=os.environ.get("TODORAILS_LOG_FILE") or None,
    )
