from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./swasth_khet.db"

    # Bearer tokens are issued by the auth service; we only verify them
    JWT_SECRET: str = "super-secret-key-change-in-prod-0123456789"
    JWT_ALGORITHM: str = "HS256"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # Carbon credits (notional rate, per tonne CO2e)
    CARBON_CREDIT_PRICE_PER_TON: float = 400.0
    CARBON_CREDIT_CURRENCY: str = "INR"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
