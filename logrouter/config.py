"""Host configuration — env-driven via pydantic-settings.

Reads from a .env file and LOGROUTER_* environment variables.

Examples
--------
::

    export LOGROUTER_LOG_LEVEL=DEBUG
    export LOGROUTER_DEFAULT_PROFILE=/etc/logrouter/profile.json
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from logrouter.routing.formatting import MAX_MESSAGE_LENGTH


class RouterConfig(BaseSettings):
    """Runtime settings with environment variable overrides."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LOGROUTER_",
        env_file_encoding="utf-8",
    )

    environment: str = "development"
    log_level: str = "WARNING"  # level for logrouter's own diagnostics

    # Upper bound on a rendered message, in characters
    max_message_length: int = Field(MAX_MESSAGE_LENGTH, ge=0)

    # Host wiring
    default_profile: Path = Path("logrouter.json")
    log_dir: Path = Path("logs")

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton — import as `from logrouter.config import config`
config = RouterConfig()
