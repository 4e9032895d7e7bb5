# app/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    DATA_DIR: Path = Path("data")  # where the CSV tables live
    USERS_FILE: str = "users.csv"
    PRODUCTS_FILE: str = "products.csv"
    CARTS_FILE: str = "carts.csv"

    JWT_SECRET: str = "dev-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # values a freshly registered user / new cart starts with
    DEFAULT_ADDRESS: str = "ADDRESS_NOT_SET"
    DEFAULT_WALLET_MONEY: float = 500.0
    DEFAULT_PAYMENT_OPTION: str = "PAYMENT_OPTION_DEFAULT"

    CORS_ORIGINS: str = ""

    # Example .env:
    # DATA_DIR=./data
    # JWT_SECRET=something-long-and-random

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()


settings = get_settings()
