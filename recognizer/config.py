"""
Configuration models and loader.
"""

import yaml
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from recognizer import __version__
from recognizer.exceptions import ConfigError


class ArtworkSettings(BaseModel):
    """Artwork lookup settings."""

    base_url: str = "https://api.deezer.com"
    timeout: float = Field(default=10.0, gt=0)  # Seconds per request
    max_workers: int = Field(default=2, ge=1)  # Threads in the I/O executor
    user_agent: str = f"musicrecognizer/{__version__}"


class DeepLinkSettings(BaseModel):
    """Notification deep link settings."""

    scheme: str = "app"
    target: str = "MainActivity"


class RecognizerConfig(BaseModel):
    """Main configuration model."""

    version: Literal["1.0"] = "1.0"
    artwork: ArtworkSettings = Field(default_factory=ArtworkSettings)
    deep_links: DeepLinkSettings = Field(default_factory=DeepLinkSettings)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @classmethod
    def from_yaml(cls, path: str) -> "RecognizerConfig":
        """
        Load and validate configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            RecognizerConfig instance

        Raises:
            ConfigError: If file not found or invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing YAML file: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Invalid configuration: top level must be a mapping")

        # YAML reads 1.0 as a float
        version = data.get("version", "1.0")
        if str(version) != "1.0":
            raise ConfigError(f"Invalid version: {version}. Expected 1.0")
        data["version"] = "1.0"

        if isinstance(data.get("log_level"), str):
            data["log_level"] = data["log_level"].upper()

        try:
            return cls(**data)
        except Exception as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(config_path: str) -> RecognizerConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        RecognizerConfig instance
    """
    return RecognizerConfig.from_yaml(config_path)
