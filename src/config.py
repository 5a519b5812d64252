from functools import lru_cache
from pathlib import Path
from typing import Any, Literal
import re

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_TEMPLATE_DIR = Path(__file__).parent / "templates"


class Settings(BaseSettings):
    # Application Configuration
    WIKI_VERSION: str = "v0.1.x"
    API_NAME: str = "Flatwiki"
    API_SUMMARY: str = "A minimal personal wiki serving flat text files"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Page Storage
    DATA_DIR: Path = Path("data")
    CREATE_DATA_DIR: bool = True
    PAGE_FILE_MODE: int = 0o600

    # Templates
    TEMPLATE_DIR: Path = PACKAGE_TEMPLATE_DIR
    BASE_TEMPLATE: str = "base"

    FRONT_PAGE: str = "FrontPage"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("FRONT_PAGE")
    def validate_front_page(cls, value: str):
        if not re.fullmatch(r"[a-zA-Z0-9]+", value):
            raise ValueError("'FRONT_PAGE' must contain only alphanumeric characters")
        return value

    @field_validator("PAGE_FILE_MODE", mode="before")
    def parse_file_mode(cls, v: Any):
        # Accept octal strings such as "600" or "0o600" from the environment
        if isinstance(v, str):
            return int(v.removeprefix("0o"), 8)
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
