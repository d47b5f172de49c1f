from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FAKEGEN_", case_sensitive=False)

    locale: str = Field(default="en", min_length=1)
    total_records: int = Field(default=1000, ge=0)
    file_mode: str = "0644"
