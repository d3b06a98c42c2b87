"""Application configuration."""
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Voice Order Assistant"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Language processing
    tokenizer_backend: Literal["okt", "whitespace"] = "whitespace"
    vocabulary_file: Optional[str] = None  # Defaults to the bundled vocabulary.yaml

    # Menu
    menu_file: Optional[str] = None  # Defaults to the bundled menu.yaml

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
