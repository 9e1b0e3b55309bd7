"""Configuration management using Pydantic Settings"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (analysis snapshots)
    database_url: str = "sqlite:///./meridian_cashflow.db"

    # External Services
    transaction_source_base: str = "http://localhost:8001"

    # Service
    service_name: str = "meridian-cashflow"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Analytics
    observation_window_months: int = Field(12, gt=0)  # months the transaction list is assumed to span
    history_months: int = Field(12, ge=0)
    history_seed: Optional[int] = None  # set for reproducible synthetic history
    emergency_fund_target_months: float = 6.0
    emergency_fund_current_months: float = 4.2


settings = Settings()
