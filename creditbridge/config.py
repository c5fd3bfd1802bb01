"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = "sqlite:///./creditbridge.db"

    # Service
    service_name: str = "creditbridge-api"
    log_level: str = "INFO"

    # Scoring
    clamp_cash_flow: bool = False  # bound the cash flow factor to [0, 100]
    loan_offer_ttl_days: int = 7

    # Synthetic history chart
    history_baseline_score: int = 580
    history_months: int = 12
    history_jitter: float = 10.0


settings = Settings()
