"""
Configuration module for dirscan.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from defaults.yaml for maintainability.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from dirscan.core.path_utils import split_pattern_list

logger = logging.getLogger(__name__)

# Path to the default configuration file
_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

# Cache for default values
_defaults_cache: dict[str, Any] | None = None


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from defaults.yaml."""
    global _defaults_cache

    if _defaults_cache is not None:
        return _defaults_cache

    if not _DEFAULTS_CONFIG_PATH.exists():
        logger.warning(f"Defaults config not found: {_DEFAULTS_CONFIG_PATH}")
        _defaults_cache = {}
        return _defaults_cache

    try:
        content = _DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8")
        _defaults_cache = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse defaults config: {e}")
        _defaults_cache = {}

    return _defaults_cache


def _get_default(section: str, key: str, fallback: Any = None) -> Any:
    """Get a default value from the defaults config."""
    defaults = _load_defaults()
    section_defaults = defaults.get(section) or {}
    value = section_defaults.get(key, fallback)
    # Never hand out the cached list itself
    return list(value) if isinstance(value, list) else value


@dataclass
class ScanSettings:
    """Pattern and traversal settings for a scan."""

    includes: list[str] = field(default_factory=lambda: _get_default("scan", "includes", []))
    excludes: list[str] = field(default_factory=lambda: _get_default("scan", "excludes", []))
    use_default_excludes: bool = field(
        default_factory=lambda: _get_default("scan", "use_default_excludes", True)
    )
    case_sensitive: bool = field(
        default_factory=lambda: _get_default("scan", "case_sensitive", True)
    )
    follow_symlinks: bool = field(
        default_factory=lambda: _get_default("scan", "follow_symlinks", True)
    )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _get_default("logging", "level", "WARNING"))
    format: str = field(
        default_factory=lambda: _get_default(
            "logging", "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )


@dataclass
class DirscanConfig:
    """Main configuration class for dirscan."""

    scan: ScanSettings = field(default_factory=ScanSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "DirscanConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            DirscanConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the file format is unsupported, the file cannot be
                parsed, or it holds unknown settings
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        try:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif path.suffix == ".json":
                data = json.loads(content) if content.strip() else {}
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ValueError(f"Failed to parse configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "DirscanConfig":
        """Create DirscanConfig from a dictionary."""
        config = cls()

        unknown = set(data) - {"scan", "logging"}
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")

        if "scan" in data:
            config.scan = _build_section(ScanSettings, "scan", data["scan"])
        if "logging" in data:
            config.logging = _build_section(LoggingConfig, "logging", data["logging"])

        return config

    def apply_env_overrides(self) -> "DirscanConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: DIRSCAN_<SECTION>_<KEY>
        Examples:
            - DIRSCAN_SCAN_INCLUDES (comma-separated)
            - DIRSCAN_SCAN_FOLLOW_SYMLINKS
            - DIRSCAN_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied
        """
        env_mappings = {
            # Scan settings
            "DIRSCAN_SCAN_INCLUDES": ("scan", "includes", split_pattern_list),
            "DIRSCAN_SCAN_EXCLUDES": ("scan", "excludes", split_pattern_list),
            "DIRSCAN_SCAN_USE_DEFAULT_EXCLUDES": ("scan", "use_default_excludes", _parse_bool),
            "DIRSCAN_SCAN_CASE_SENSITIVE": ("scan", "case_sensitive", _parse_bool),
            "DIRSCAN_SCAN_FOLLOW_SYMLINKS": ("scan", "follow_symlinks", _parse_bool),
            # Logging config
            "DIRSCAN_LOGGING_LEVEL": ("logging", "level", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self, section)
                setattr(section_obj, key, converter(value))

        return self

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Serialize configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_json(self) -> str:
        """Serialize configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Path | str) -> None:
        """
        Save configuration to a file.

        Args:
            path: Path to save the configuration (.yaml, .yml, or .json)

        Raises:
            ValueError: If the file format is unsupported
        """
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            content = self.to_yaml()
        elif path.suffix == ".json":
            content = self.to_json()
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _build_section(section_cls: type, name: str, values: Any) -> Any:
    """Build one config section, rejecting unknown keys."""
    if values is None:
        return section_cls()
    if not isinstance(values, dict):
        raise ValueError(f"Configuration section '{name}' must be a mapping")

    known = {f.name for f in fields(section_cls)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown keys in configuration section '{name}': {sorted(unknown)}")

    return section_cls(**values)


def _parse_bool(value: str) -> bool:
    """Parse a string to boolean."""
    return value.lower() in ("true", "1", "yes", "on")


def load_config(config_path: Optional[Path | str] = None, apply_env: bool = True) -> DirscanConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, uses defaults.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        DirscanConfig instance
    """
    if config_path:
        config = DirscanConfig.from_file(config_path)
    else:
        config = DirscanConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
