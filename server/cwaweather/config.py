"""Configuration loader using pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server configuration loaded from environment variables."""

    # Without a key the server still starts; weather endpoints answer 500.
    cwa_api_key: str | None = None

    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    log_level: str = "INFO"

    cwa_api_base_url: str = "https://opendata.cwa.gov.tw/api"
    # 一般天氣預報-今明 36 小時天氣預報
    cwa_dataset_id: str = "F-C0032-001"

    cors_allow_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}
