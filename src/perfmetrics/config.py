from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    env: str = Field(default="dev")
    log_level: str = Field(default="INFO")
    log_file: str | None = None
    log_max_bytes: int = Field(default=10 * 1024 * 1024)
    log_backup_count: int = Field(default=5)
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PERFMETRICS_",
        env_file=".env",
        extra="ignore",
    )

settings = Settings()
