"""
Configuration loader for the sparse vector parser.
Loads YAML config with optional per-environment overrides.
"""

import yaml
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class Config:
    """
    Singleton config loader.

    Usage:
        config = Config.load("config/parser.yaml")
        marker = config.get("parser.comment_marker")
        parser_section = config.get_section("parser")
    """

    _instance: Optional["Config"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def load(cls, config_path: str = "config/parser.yaml", env: str = None) -> "Config":
        """
        Load config from YAML file.

        Args:
            config_path: Path to main config file
            env: Environment name (loads environments/{env}.yaml next to the
                config file as override, if present)

        Returns:
            Config instance
        """
        instance = cls()

        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(path, "r") as f:
            instance._config = yaml.safe_load(f) or {}

        logger.info(f"Loaded config from {config_path}")

        if env:
            env_path = path.parent / "environments" / f"{env}.yaml"
            if env_path.exists():
                with open(env_path, "r") as f:
                    env_config = yaml.safe_load(f) or {}
                instance._config = instance._merge_configs(instance._config, env_config)
                logger.info(f"Applied environment override: {env}")
            else:
                logger.debug(f"No override for environment {env} at {env_path}")

        return instance

    def _merge_configs(self, base: dict, override: dict) -> dict:
        """Deep merge override into base config."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.

        Example:
            config.get("parser.comment_marker")  # Returns "#"
            config.get("parser.missing", 100)    # Returns 100
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section as dict."""
        return self.get(section, {})

    @classmethod
    def reset(cls):
        """Reset singleton instance (useful for testing)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class ParserOptions:
    """
    Settings shared by every line format.

    Attributes:
        comment_marker: Lines starting with this prefix are skipped
        label_index: Token position always treated as a label (None = no label column)
        line_format: Registered line format name
        encoding: Text encoding used when loading from a path
    """
    comment_marker: str = "#"
    label_index: Optional[int] = None
    line_format: str = "sparse"
    encoding: str = "utf-8"

    @classmethod
    def from_config(cls, config: Config) -> "ParserOptions":
        """Build options from the `parser` section of a loaded Config."""
        section = config.get_section("parser") or {}
        label_index = section.get("label_index")
        return cls(
            comment_marker=section.get("comment_marker", cls.comment_marker),
            label_index=int(label_index) if label_index is not None else None,
            line_format=section.get("line_format", cls.line_format),
            encoding=section.get("encoding", cls.encoding),
        )
