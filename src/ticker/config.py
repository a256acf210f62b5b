from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TickerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    interval_seconds: float = Field(default=1.0, ge=0, allow_inf_nan=False)
    demo_count: int = Field(default=10, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


def get_settings() -> TickerSettings:
    return TickerSettings()
