from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    task_limit: int = Field(default=500, ge=1)
    max_workers: int | None = Field(default=None, ge=1)

    supported_extensions: list[str] = ["txt", "csv", "json"]

    output_subdirectory: str = "Edited"
    output_prefix: str = "New-"
    echo_report: bool = True
