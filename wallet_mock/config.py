"""Configuration settings for the Wallet Balances Mock API."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service identification
    service_name: str = "wallet-mock"

    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 3005

    # Artificial latency applied to GET /wallets before the data is built
    response_delay_ms: int = 3000

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
