"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "quote-gateway"
    log_level: str = "INFO"

    # Plans
    default_schedule: str = "monthly"  # monthly | weekly
    flat_plan_anchor_weekday: Optional[int] = Field(default=None, ge=0, le=6)  # 0 = Monday


settings = Settings()
