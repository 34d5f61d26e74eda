from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    endpoint_url: str = ""
    log_level: str = "INFO"
    input_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_prefix="SUMOPOST_", env_file=".env", env_file_encoding="utf-8"
    )


settings = Settings()
