"""Configuration module for AI Notes.

This module provides configuration dataclasses, loading and profile management.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass
class AnalysisConfig:
    """Text analysis limits and thresholds."""

    max_sentences: int = 3
    keyword_limit: int = 5
    title_max_length: int = 50
    positive_threshold: float = 0.3
    negative_threshold: float = -0.3
    auto_summarize: bool = True


@dataclass
class StorageConfig:
    """MongoDB document store configuration."""

    uri: str = "mongodb://localhost:27017"
    database: str = "ainotes"
    collection: str = "notes"
    connect_timeout_ms: int = 5000
    server_selection_timeout_ms: int = 5000
    poll_interval: float = 2.0


@dataclass
class UserConfig:
    """Owner of the notes handled by this process."""

    user_id: str = "demo_user"


@dataclass
class STTConfig:
    """Speech-to-text configuration."""

    language: str = "en"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class AinotesConfig:
    """Main AI Notes configuration."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    user: UserConfig = field(default_factory=UserConfig)
    stt: STTConfig = field(default_factory=STTConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader(Protocol):
    """Protocol for configuration loading."""

    def load(self, path: Path) -> AinotesConfig:
        """Load configuration from file path."""
        ...

    def load_profile(self, profile: str) -> AinotesConfig:
        """Load configuration by profile name (dev, prod, test)."""
        ...

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        ...


__all__ = [
    "AinotesConfig",
    "AnalysisConfig",
    "ConfigLoader",
    "LoggingConfig",
    "STTConfig",
    "StorageConfig",
    "UserConfig",
]
