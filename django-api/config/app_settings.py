from pathlib import Path
from typing import Annotated

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


def _split_csv(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "Event Booking"
    DEBUG: bool = False
    SECRET_KEY: SecretStr = SecretStr("dev_secret_key_change_in_production")
    ALLOWED_HOSTS: Annotated[list[str], NoDecode] = ["localhost", "127.0.0.1", "testserver"]

    # Database
    DATABASE_ENGINE: str = "django.db.backends.sqlite3"
    DATABASE_NAME: str = str(_PROJECT_ROOT / "db.sqlite3")
    DATABASE_USER: str = ""
    DATABASE_PASSWORD: SecretStr = SecretStr("")
    DATABASE_HOST: str = ""
    DATABASE_PORT: str = ""

    LOG_LEVEL: str = "INFO"

    # Catalog
    EVENT_CATEGORIES: Annotated[list[str], NoDecode] = [
        "All",
        "Music",
        "Sports",
        "Technology",
        "Business",
        "Arts",
        "Education",
    ]

    # Booking workflow
    BOOKING_REDIRECT_TARGET: str = "/dashboard"
    BOOKING_REDIRECT_DELAY_SECONDS: float = 2.0
    ATOMIC_SEAT_DECREMENT: bool = False  # off: bookings never touch available_seats

    @field_validator("ALLOWED_HOSTS", "EVENT_CATEGORIES", mode="before")
    @classmethod
    def assemble_list(cls, v: str | list[str]) -> list[str]:
        return _split_csv(v)


app_settings = AppSettings()
