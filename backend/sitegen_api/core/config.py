"""Configuration and settings"""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # OpenAI API
    openai_api_key: str = Field(default="")
    openai_timeout_seconds: float = Field(default=60.0, gt=0)
    intent_model: str = Field(default="gpt-4o-mini")
    codegen_model: str = Field(default="gpt-4o-mini")

    # Artifact Storage
    artifact_dir: Path = Field(default=Path("./generated-site"))
    archive_staging_dir: Optional[Path] = Field(default=None)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    landing_page: Optional[Path] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")

    # API Configuration
    api_title: str = "Tamil Site Generator API"
    api_version: str = "0.1.0"


# Global settings instance
settings = Settings()
