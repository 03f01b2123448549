# elkargs/config/settings.py

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration of the elkargs command line, loaded from the
    environment (.env).
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # General
    debug: bool = Field(False, validation_alias="ELKARGS_DEBUG")

    # Report unknown flags as a failure
    strict: bool = Field(False, validation_alias="ELKARGS_STRICT")

    # Logging (no log file when unset)
    logs_dir: Optional[str] = Field(None, validation_alias="ELKARGS_LOGS_DIR")
