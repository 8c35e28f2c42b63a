# app/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    service_name: str = "product-catalog"
    id_policy: Literal["sequential", "token"] = Field(
        "sequential",
        description="How new products get their id: counter or time+random token",
    )
    seed_catalog: bool = True
    docs_enabled: bool = True
    docs_path: str = "/api-docs"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 4000

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
