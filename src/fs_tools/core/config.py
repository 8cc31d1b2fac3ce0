"""Configuration management for fs-tools.

Only the logging and tracing layers read these settings; filesystem
operations take their options per call (see ``fs_tools.schemas``).
"""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Observability settings with environment variable support."""

    log_level: str = "WARNING"
    log_format: Literal["json", "console"] = "json"
    otel_enabled: bool = False
    otel_service_name: str = "fs-tools"

    model_config = {
        "env_prefix": "FS_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
