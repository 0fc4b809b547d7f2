"""Configuration management for list styles."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List
from pydantic import BaseModel, Field, field_validator

LIST_TAGS = ["ol", "ul"]


def _check_tag_names(value: List[str]) -> List[str]:
    if not value:
        raise ValueError("at least one tag is required")
    for tag in value:
        if not (tag.isascii() and tag.isalnum()):
            raise ValueError(f"Invalid tag name: {tag!r}")
    return value


class ParserConfig(BaseModel):
    """Configuration for the style line parser."""

    supported_tags: List[str] = Field(default_factory=lambda: list(LIST_TAGS))

    @field_validator("supported_tags")
    @classmethod
    def check_tags(cls, value: List[str]) -> List[str]:
        return _check_tag_names(value)


class ProjectorConfig(BaseModel):
    """Configuration for the editor views built from parsed styles."""

    decorator_tags: List[str] = Field(default_factory=lambda: list(LIST_TAGS))
    editor_key: str = "list"

    @field_validator("decorator_tags")
    @classmethod
    def check_tags(cls, value: List[str]) -> List[str]:
        return _check_tag_names(value)


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "json"
    file: Optional[str] = None


class ListStylesSettings(BaseModel):
    """Main settings class for list styles."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    projector: ProjectorConfig = Field(default_factory=ProjectorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    current_dir = Path.cwd()
    config_files = [
        current_dir / "list-styles.yaml",
        current_dir / "list-styles.yml",
        current_dir / "config" / "list-styles.yaml",
    ]

    for config_file in config_files:
        if config_file.exists():
            return config_file

    return current_dir / "config" / "list-styles.yaml"


def load_config(config_path: Optional[str] = None) -> ListStylesSettings:
    """Load settings from file or environment variables."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    config_dict: Dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, "r") as f:
                file_config = yaml.safe_load(f)
                if file_config:
                    config_dict.update(file_config)
        except Exception as e:
            raise ValueError(f"Failed to load config from {path}: {e}")

    env_overrides = _get_env_overrides()
    _deep_update(config_dict, env_overrides)

    try:
        return ListStylesSettings(**config_dict)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}")


def _get_env_overrides() -> Dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: Dict[str, Any] = {}

    supported_tags = os.getenv("LIST_STYLES_SUPPORTED_TAGS")
    if supported_tags:
        overrides.setdefault("parser", {})["supported_tags"] = [
            tag.strip() for tag in supported_tags.split(",") if tag.strip()
        ]

    if os.getenv("LIST_STYLES_EDITOR_KEY"):
        overrides.setdefault("projector", {})["editor_key"] = os.getenv("LIST_STYLES_EDITOR_KEY")

    # Logging configuration
    if os.getenv("LOG_LEVEL"):
        overrides.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    if os.getenv("LOG_FILE"):
        overrides.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

    if os.getenv("LOG_FORMAT"):
        overrides.setdefault("logging", {})["format"] = os.getenv("LOG_FORMAT")

    return overrides


def _deep_update(base_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> None:
    """Deep update a dictionary with another dictionary."""
    for key, value in update_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_update(base_dict[key], value)
        else:
            base_dict[key] = value


def save_config(config: ListStylesSettings, config_path: Optional[str] = None) -> None:
    """Save settings to file."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump()

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, indent=2)


DEFAULT_CONFIG = ListStylesSettings()
