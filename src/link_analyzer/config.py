"""
Configuration management for the link analyzer.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisConfig(BaseSettings):
    """Default options for the analysis pipeline."""

    assume_https: bool = Field(
        default=True,
        description="Prefix https:// to lines that carry no URI scheme",
    )
    dedupe: bool = Field(
        default=True,
        description="Collapse lines whose normalized form matches case-insensitively",
    )
    top_limit: int = Field(
        default=10, description="Number of entries shown per distribution"
    )

    model_config = SettingsConfigDict(env_prefix="ANALYSIS_")


class HistoryConfig(BaseSettings):
    """Configuration for the analysis history store."""

    base_path: Path = Field(
        default=Path("./data"), description="Base path for local storage"
    )
    max_entries: int = Field(
        default=50, description="Maximum number of analyses kept, most recent first"
    )
    namespace: str = Field(
        default="default", description="History namespace (one file per namespace)"
    )

    model_config = SettingsConfigDict(env_prefix="HISTORY_")


class ServerConfig(BaseSettings):
    """Configuration for the HTTP API."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
