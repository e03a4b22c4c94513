"""Centralised application settings loaded from environment / .env file."""

from typing import Literal

from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    # Trips
    trip_fare: float = 25.0
    currency_symbol: str = "$"

    # Drivers get ids from their own numbering space: count + offset
    driver_id_offset: int = 100

    # Logging
    log_level: LogLevel = "WARNING"

    model_config = {"env_file": ".env", "env_prefix": "RIDESHARE_", "extra": "ignore"}


settings = Settings()
