from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Budget Ledger API"
    database_url: str = "sqlite:///budget_ledger.db"
    log_level: str = "INFO"
    sql_echo: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BUDGET_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
