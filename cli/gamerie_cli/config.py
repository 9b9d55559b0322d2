"""Configuration management for the Gamerie terminal client."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GAMERIE_",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Search Provider
    # ==========================================================================
    provider: str = Field(
        default="demo",
        description="Search provider: 'demo' (built-in catalogue) or 'http'",
    )
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the Gamerie API server",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        le=120,
        description="HTTP request timeout in seconds",
    )
    result_limit: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum results per category",
    )
    demo_latency_ms: int = Field(
        default=0,
        ge=0,
        le=10000,
        description="Artificial latency of the demo provider",
    )

    # ==========================================================================
    # Search Widget
    # ==========================================================================
    debounce_ms: int = Field(
        default=300,
        ge=0,
        le=5000,
        description="Quiet interval before a typed query is searched",
    )

    # ==========================================================================
    # Session
    # ==========================================================================
    current_user_id: Optional[str] = Field(
        default=None,
        description="Signed-in player id",
    )
    exclude_self: bool = Field(
        default=True,
        description="Hide the signed-in player from search results",
    )

    # ==========================================================================
    # Logging & Paths
    # ==========================================================================
    log_level: str = Field(default="INFO", description="Logging level")
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".gamerie",
        description="Data directory for logs",
    )

    @property
    def logs_dir(self) -> Path:
        """Logs directory."""
        return self.data_dir / "logs"

    @property
    def log_file(self) -> Path:
        """Client log file (the terminal belongs to the TUI)."""
        return self.logs_dir / "gamerie.log"

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("data_dir", mode="after")
    @classmethod
    def ensure_data_dir_exists(cls, v: Path) -> Path:
        """Ensure data directory exists."""
        v.mkdir(parents=True, exist_ok=True)
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v

    @field_validator("provider", mode="after")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        """Validate provider name."""
        v = v.lower()
        if v not in {"demo", "http"}:
            raise ValueError("Invalid provider. Must be 'demo' or 'http'")
        return v

    @field_validator("api_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # ==========================================================================
    # Helper Methods
    # ==========================================================================
    def use_demo(self) -> bool:
        """Check if the built-in demo catalogue answers searches."""
        return self.provider == "demo"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """Reload settings (useful after env changes)."""
    get_settings.cache_clear()
    return get_settings()
