"""Configuration loader."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel

CONFIG_ENV = "RANKCURVE_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "rankcurve" / "config.yaml"


def _with_secret(section: Dict[str, Any], value_key: str, env_key: str) -> Dict[str, Any]:
    """Fill ``value_key`` from the environment variable named by ``env_key``, if set."""
    env_name = section.get(env_key)
    if env_name and os.environ.get(env_name):
        section[value_key] = os.environ[env_name]
    return section


class Config:
    """Configuration manager.

    The file is read lazily on first access. Without an explicit path the
    ``RANKCURVE_CONFIG`` environment variable is honoured before the default
    location.
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV)
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        self.config_path = Path(config_path)
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config

    @property
    def workspace_root(self) -> Path:
        """Workspace directory, created on first use."""
        path = Path(self.config.workspace_root).expanduser()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def lists_path(self) -> Path:
        """YAML file backing the file store."""
        return self.workspace_root / self.config.storage.lists_file

    def get_db_config(self) -> Dict[str, Any]:
        """Postgres settings with the password resolved from ``password_env``."""
        return _with_secret(self.config.postgres.model_dump(), "password", "password_env")

    def get_search_config(self) -> Dict[str, Any]:
        """Search settings with the TMDB key resolved from ``tmdb_api_key_env``."""
        return _with_secret(self.config.search.model_dump(), "tmdb_api_key", "tmdb_api_key_env")


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}
        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)
