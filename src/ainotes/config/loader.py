"""YAML configuration loader with inheritance support.

Supports:
- Loading YAML config files
- Config inheritance via 'extends' key
- Deep merging of nested config
- Environment overrides for deployment secrets
"""

import os
from pathlib import Path
from typing import Any

import yaml

from . import (
    AinotesConfig,
    AnalysisConfig,
    LoggingConfig,
    StorageConfig,
    STTConfig,
    UserConfig,
)

# Environment variable -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "AINOTES_MONGODB_URI": ("storage", "uri"),
    "AINOTES_USER_ID": ("user", "user_id"),
    "AINOTES_LOG_LEVEL": ("logging", "level"),
}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Values from override take precedence. Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Load YAML file with inheritance support.

    If the file contains an 'extends' key, the base config is loaded first
    and merged with the current config.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if "extends" in config:
        base_name = config.pop("extends")
        base_path = path.parent / base_name
        base_config = load_yaml_with_inheritance(base_path)
        config = deep_merge(base_config, config)

    return config


def apply_env_overrides(
    data: dict[str, Any], environ: dict[str, str] | None = None
) -> dict[str, Any]:
    """Overlay environment variables onto raw config.

    Args:
        data: Raw config dict (with top-level 'ainotes' key)
        environ: Environment mapping, defaults to os.environ

    Returns:
        New dict with overrides applied
    """
    environ = dict(os.environ) if environ is None else environ
    overrides: dict[str, Any] = {}
    for variable, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(variable)
        if value:
            overrides.setdefault(section, {})[key] = value

    if not overrides:
        return data
    return deep_merge(data, {"ainotes": overrides})


def dict_to_config(data: dict[str, Any]) -> AinotesConfig:
    """Convert raw dict to typed AinotesConfig dataclass."""
    ainotes_data = data.get("ainotes", {}) or {}

    # YAML sections may be present but empty
    def safe_get(key: str) -> dict[str, Any]:
        value = ainotes_data.get(key, {})
        return value if value is not None else {}

    return AinotesConfig(
        analysis=AnalysisConfig(**safe_get("analysis")),
        storage=StorageConfig(**safe_get("storage")),
        user=UserConfig(**safe_get("user")),
        stt=STTConfig(**safe_get("stt")),
        logging=LoggingConfig(**safe_get("logging")),
    )


class YAMLConfigLoader:
    """YAML configuration loader implementation."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize loader with optional config directory.

        Args:
            config_dir: Directory containing config files.
                        Defaults to 'config' relative to project root.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent.parent / "config"
        self._config_dir = config_dir

    def load(self, path: Path) -> AinotesConfig:
        """Load configuration from file path.

        Args:
            path: Path to YAML config file

        Returns:
            Parsed AinotesConfig
        """
        raw_config = apply_env_overrides(load_yaml_with_inheritance(path))
        return dict_to_config(raw_config)

    def load_profile(self, profile: str) -> AinotesConfig:
        """Load configuration by profile name.

        Args:
            profile: Profile name (e.g., 'dev', 'prod')

        Returns:
            Parsed AinotesConfig for the profile
        """
        config_path = self._config_dir / f"{profile}.yaml"
        return self.load(config_path)

    def get_config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self._config_dir


def load_config(path: str | Path | None = None, profile: str | None = None) -> AinotesConfig:
    """Load AI Notes configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test') if path not given

    Returns:
        Parsed AinotesConfig

    Examples:
        >>> config = load_config(profile="dev")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    loader = YAMLConfigLoader()

    if path is not None:
        return loader.load(Path(path))
    elif profile is not None:
        return loader.load_profile(profile)
    else:
        return loader.load_profile("dev")


__all__ = [
    "ENV_OVERRIDES",
    "YAMLConfigLoader",
    "apply_env_overrides",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
]
