"""Configuration management using Pydantic Settings"""

from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "savings-planner"
    log_level: str = "INFO"

    # Projection engine
    goal_search_cap_months: int = 1200  # 100 years
    default_goal_timeframe_years: float = 5.0
    default_fire_growth_rate: float = 7.0
    max_improvement_tips: int = 10

    # Instrument key -> default annual rate, e.g. RATE_OVERRIDES='{"ppf": 7.1}'
    rate_overrides: Dict[str, float] = {}


settings = Settings()
