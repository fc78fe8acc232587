from __future__ import annotations

from pathlib import Path
from typing import Annotated, List

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Load .env file explicitly
ENV_FILE_NAME = ".env"
env_path = Path.cwd() / ENV_FILE_NAME
load_dotenv(env_path)


class Settings(BaseSettings):
    DEFAULT_LOCALE: str = "en-US"
    BASE_LANG: str = "en"
    RESOURCES_DIRNAME: str = "resources"
    RTL_LANGS: Annotated[List[str], NoDecode] = ["ar", "iw"]
    LOG_LEVEL: str = "INFO"
    LOG_FILE: bool = False

    @field_validator("RTL_LANGS", mode="before")
    @classmethod
    def parse_rtl_langs(cls, v):  # type: ignore
        if v in (None, ""):
            return []
        if isinstance(v, str):
            return [x.strip().lower() for x in v.split(",") if x.strip()]
        return [str(x).lower() for x in v]

    @field_validator("BASE_LANG", mode="after")
    @classmethod
    def check_base_lang(cls, v: str) -> str:
        if len(v) != 2:
            raise ValueError("BASE_LANG must be a 2-letter language code")
        return v

    model_config = SettingsConfigDict(
        env_prefix="LOCALEKIT_",
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
