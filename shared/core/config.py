import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    APP_NAME: str = "Venue Booking Service API"

    # Full URL wins over the DB_* parts
    DATABASE_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASS: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: str = "5432"
    DB_NAME: str = "reservas"
    SQLITE_PATH: str = os.path.join(BASE_DIR, "reservas.db")

    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:8080",
    ]
    LOG_LEVEL: str = "INFO"

    # Compact day cells show at most this many bookings
    CALENDAR_PREVIEW_LIMIT: int = 3
    DASHBOARD_PREVIEW_LIMIT: int = 4

    CURRENCY_SYMBOL: str = "€"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def build_database_url(config: Settings) -> str:
    if config.DATABASE_URL:
        return config.DATABASE_URL
    if config.DB_HOST:
        return (
            f"postgresql+psycopg2://{config.DB_USER}:{config.DB_PASS}"
            f"@{config.DB_HOST}:{config.DB_PORT}/{config.DB_NAME}"
        )
    return f"sqlite:///{config.SQLITE_PATH}"


SQLALCHEMY_DATABASE_URL = build_database_url(settings)
