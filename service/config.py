"""Service configuration loaded from environment variables.

Every setting can be overridden with a SALON_-prefixed variable
(e.g. SALON_DATA_FILE=data/shop.json) or from a local .env file.
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class SalonSettings(BaseSettings):
    """Service configuration loaded from environment variables."""

    # Operating day
    open_hour: int = Field(
        default=10,
        ge=0,
        le=23,
        description="Hour the business day opens (offset 0)",
    )
    close_hour: int = Field(
        default=5,
        ge=0,
        le=23,
        description="Hour (next calendar day) the business day closes",
    )
    slot_minutes: int = Field(
        default=5,
        description="Timeline grid granularity in minutes",
    )

    # Data
    data_file: str = Field(
        default="data/salon.json",
        description="JSON file holding courses, options, fees, shifts and reservations",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # HTTP
    host: str = Field(default="127.0.0.1", description="Bind address for `serve`")
    port: int = Field(default=8000, description="Bind port for `serve`")

    model_config = {
        "env_prefix": "SALON_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def validate_window(self):
        if self.close_hour >= self.open_hour:
            raise ValueError("close_hour must be earlier than open_hour (the day closes after midnight)")
        return self


# Singleton pattern
_settings: SalonSettings | None = None


def get_settings() -> SalonSettings:
    """Get the settings singleton.

    Returns:
        SalonSettings: Service configuration instance
    """
    global _settings
    if _settings is None:
        _settings = SalonSettings()
    return _settings
