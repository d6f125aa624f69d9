"""
Configuration management for goimpfmt.

This module provides configuration loading with sensible defaults for the
project prefixes, file selection and reporting options.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional
import logging
import os

import yaml

logger = logging.getLogger(__name__)

CONFIG_NAMES = [".goimpfmt.yml", ".goimpfmt.yaml", "goimpfmt.yml", "goimpfmt.yaml"]

# Fields that accept either a YAML list or a comma-separated string
LIST_FIELDS = ("project", "ignore", "extensions", "excluded_dirs")
BOOL_FIELDS = ("dry_run", "quiet", "color")
FORMATS = ("pretty", "json")


@dataclass
class FormatterConfig:
    """Configuration for a formatting run."""

    # Import prefixes that belong to the project being formatted
    project: List[str] = field(default_factory=list)

    # Paths (files or directories) that are never touched
    ignore: List[str] = field(default_factory=list)

    # File selection
    extensions: List[str] = field(default_factory=lambda: [".go"])
    excluded_dirs: List[str] = field(default_factory=lambda: ["vendor", ".git", "node_modules", "testdata"])

    # Reporting
    dry_run: bool = False
    quiet: bool = False
    color: bool = True
    format: str = "pretty"  # "pretty" or "json"

    # Parallel jobs (0 = auto)
    jobs: int = 0


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"expected a list or a comma-separated string, got {value!r}")
    return [str(item) for item in value]


def _coerce(key: str, value: Any) -> Any:
    """Check a config value against its field, raising ValueError on mismatch."""
    if key in LIST_FIELDS:
        return _as_list(value)
    if key in BOOL_FIELDS:
        if not isinstance(value, bool):
            raise ValueError(f"expected true or false, got {value!r}")
        return value
    if key == "jobs":
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"expected a non-negative integer, got {value!r}")
        return value
    if key == "format" and value not in FORMATS:
        raise ValueError(f"expected one of {', '.join(FORMATS)}, got {value!r}")
    return value


def _normalize(raw: Dict[str, Any]) -> Dict[str, Any]:
    known = FormatterConfig.__dataclass_fields__
    normalized = {}
    for key, value in raw.items():
        key = str(key).replace("-", "_")
        if key not in known:
            logger.warning(f"Ignoring unknown config key: {key}")
            continue
        try:
            normalized[key] = _coerce(key, value)
        except ValueError as e:
            logger.warning(f"Ignoring config key {key}: {e}; using the default")
    return normalized


def load_config(config_path: Optional[str] = None) -> FormatterConfig:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to config file (YAML). If None, uses defaults.

    Returns:
        FormatterConfig instance
    """
    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f) or {}

            if not isinstance(file_config, dict):
                raise ValueError("top level must be a mapping")

            merged_config = asdict(FormatterConfig())
            merged_config.update(_normalize(file_config))
            return FormatterConfig(**merged_config)

        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            logger.warning("Using default configuration.")

    return FormatterConfig()


def save_config(config: FormatterConfig, config_path: str) -> None:
    """
    Save configuration to file.

    Args:
        config: FormatterConfig to save
        config_path: Path where to save the config
    """
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(asdict(config), f, default_flow_style=False, indent=2, sort_keys=False)


def find_config_file(start_path: str = ".") -> Optional[str]:
    """
    Find configuration file by walking up the directory tree.

    Looks for files in this order:
    1. .goimpfmt.yml
    2. .goimpfmt.yaml
    3. goimpfmt.yml
    4. goimpfmt.yaml

    Args:
        start_path: File or directory to start searching from

    Returns:
        Path to config file or None if not found
    """
    current_path = os.path.abspath(start_path)
    if os.path.isfile(current_path):
        current_path = os.path.dirname(current_path)

    while True:
        for config_name in CONFIG_NAMES:
            config_path = os.path.join(current_path, config_name)
            if os.path.exists(config_path):
                return config_path

        parent_path = os.path.dirname(current_path)
        if parent_path == current_path:
            # Reached the root directory
            break
        current_path = parent_path

    return None


def anchor_paths(paths: List[str], config_path: str) -> List[str]:
    """Resolve relative paths from a config file against the file's directory."""
    base = os.path.dirname(os.path.abspath(config_path))
    return [os.path.join(base, path) for path in paths]
