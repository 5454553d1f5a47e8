"""
Application configuration settings.
Loads environment variables and provides typed access to all config values.
"""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_ARCHITECTURE_DEFS_PATH = Path(__file__).resolve().parent / "data" / "architecture_defs.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Required values are validated where they are used, not here:
    - ANTHROPIC_API_KEY: checked when the model gateway is first built
    - DATABASE_URL: checked at startup when persistence is enabled
    """

    # Application
    app_name: str = "Architecture Interview Coach"
    debug: bool = False
    log_level: str = "INFO"

    # Language model
    anthropic_api_key: str = ""
    model_name: str = "claude-sonnet-4-20250514"
    model_max_tokens: int = 2048

    # Persistence
    persistence_enabled: bool = True
    database_url: str = ""

    # CORS
    frontend_origin: str = "http://localhost:5173"

    # Component whitelist used by the evaluation prompt
    architecture_defs_path: str = ""

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_chat_per_minute: int = 30
    rate_limit_evaluate_per_hour: int = 30

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    def resolve_architecture_defs_path(self) -> Path:
        """Return the whitelist path, falling back to the packaged catalog."""
        if self.architecture_defs_path:
            return Path(self.architecture_defs_path)
        return DEFAULT_ARCHITECTURE_DEFS_PATH


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
