# dirzip/src/dirzip/core/config.py

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from typing import Literal, Optional
from pathlib import Path


class Settings(BaseSettings):
    # Read verbatim from ZIP_PASSWORD; never shown in repr or logs
    zip_password: Optional[str] = Field(default=None, validation_alias="ZIP_PASSWORD", repr=False)
    zip_binary: str = Field(default="zip", validation_alias="ZIP_BINARY")

    max_workers: Optional[int] = Field(default=None, ge=1)
    output_dir: Path = Field(default=Path("."))
    keyring_service: Optional[str] = Field(default=None)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DIRZIP_",
        "populate_by_name": True,
        "extra": "ignore"
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied."""
        update = {key: value for key, value in overrides.items() if value is not None}
        return self.model_copy(update=update)


def load_settings(**overrides) -> Settings:
    """Build settings from the environment once, then apply CLI overrides."""
    return Settings().with_overrides(**overrides)
