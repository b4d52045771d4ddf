# account_service/core/config.py
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./accounts.db")
    DATABASE_URL_SYNC: str = Field("sqlite:///./accounts.db")

    # Ledger
    RECENT_TRANSACTIONS_LIMIT: int = 5
    ACCOUNT_NUMBER_DIGITS: int = 10
    ACCOUNT_NUMBER_ATTEMPTS: int = 5

    # Clients
    ACCOUNT_SERVICE_URL: str = Field("http://localhost:8000/api/v1")
    CLIENT_TIMEOUT_SECONDS: float = 10.0
    SESSION_FILE: str = Field("loggedin")

    # Logging
    SERVICE_NAME: str = Field("account_service")
    LOG_DIR: str | None = None
    LOG_LEVEL: str = Field("info")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
