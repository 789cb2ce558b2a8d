# compsearch/src/compsearch/core/config.py

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from compsearch.core.settings import DEFAULT_CONTROL_NAME


class Settings(BaseSettings):
    # Search controls
    use_patterns: bool = Field(default=False)
    search_string: str = Field(default="")
    search_all_controls: bool = Field(default=False)
    control_name: str = Field(default=DEFAULT_CONTROL_NAME)

    # Where the CLI loads components from when --registry is not given
    registry_path: Optional[Path] = Field(default=None)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="COMPSEARCH_",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


# Instantiate settings
settings = Settings()
