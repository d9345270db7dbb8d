"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (PREFIX_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config(config_file="journalsync.yaml", repo_root="~/site")

    config.get("sync.debounce_minutes")   # dot-notation access
    config.resolve_path("paths.source_dir")  # absolute Path under repo_root
    config.validated()                    # typed JournalSyncConfig
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from journalsync.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from journalsync.core.config_schema import JournalSyncConfig

_DEFAULT_ENV_PREFIX = "JOURNALSYNC_"
DEFAULT_CONFIG_NAME = "journalsync.yaml"
DEFAULT_SOURCE_DIR = os.path.join("obsidian", "journal")
DEFAULT_DEST_DIR = os.path.join("src", "content", "journal")


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    JOURNALSYNC_SYNC__DEBOUNCE_MINUTES=5 -> config["sync"]["debounce_minutes"] = "5"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        repo_root: str | None = None,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            repo_root: Git working tree holding both journal directories.
                Defaults to the current directory.
            defaults: Additional default values to merge.
        """
        self.config_file = config_file
        self.env_prefix = env_prefix or ""
        self._repo_root = repo_root or os.getcwd()
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    def _get_default_config(self) -> dict[str, Any]:
        return {
            "paths": {
                "repo_root": os.path.expanduser(self._repo_root),
                "source_dir": DEFAULT_SOURCE_DIR,
                "dest_dir": DEFAULT_DEST_DIR,
            },
            "sync": {
                "interval_minutes": 30,
                "debounce_minutes": 30,
            },
            "git": {
                "remote": "",
                "branch": "",
                "commit_prefix": "journal: update entries",
            },
            "logging": {
                "level": "INFO",
                "file": "",
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path) as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                elif ext == ".json":
                    data = json.load(f)
                else:
                    return {}
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if part not in current or not isinstance(current[part], dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.source_dir", "git.remote"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def get_repo_root(self) -> Path:
        """Return the resolved repository root."""
        return Path(os.path.expanduser(str(self.get("paths.repo_root", self._repo_root)))).resolve()

    def resolve_path(self, key_path: str) -> Path:
        """Resolve a configured path, anchoring relative values at the repo root."""
        value = self.get(key_path)
        if not value:
            raise ConfigurationError(f"Missing config value: {key_path}")
        path = Path(os.path.expanduser(str(value)))
        if not path.is_absolute():
            path = self.get_repo_root() / path
        return path

    def validated(self) -> JournalSyncConfig:
        """Return a typed, validated view of the merged configuration."""
        from pydantic import ValidationError

        from journalsync.core.config_schema import JournalSyncConfig

        try:
            return JournalSyncConfig.model_validate(self.config_data)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
