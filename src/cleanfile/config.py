"""Configuration loader for cleanfile defaults.

Defaults are read from YAML files with priority resolution:
1. An explicit ``--config`` path (highest priority)
2. User config: ~/.config/cleanfile/config.yaml
3. Project config: .cleanfile.yaml in the current directory
4. Built-in defaults (fallback)
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from .errors import ConfigError
from .options import CleaningOptions, LineEnding, StripFormat

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml
        _yaml = yaml
    return _yaml


@dataclass
class CleanfileConfig:
    """Settings that can come from config files, overridable by flags.

    Field names match the YAML keys.
    """
    ascii: bool = True
    control: bool = True
    zerowidth: bool = True
    bom: bool = True
    normalize: bool = False
    preserve_newlines: bool = True
    os: str = "auto"
    strip: str = "none"
    backup: bool = True
    verbose: bool = False
    details: bool = False

    def to_options(self) -> CleaningOptions:
        """Build validated CleaningOptions, raising ConfigError on bad names."""
        try:
            target = LineEnding.from_name(self.os)
            strip_format = StripFormat.from_name(self.strip)
        except ValueError as e:
            raise ConfigError(str(e)) from e
        return CleaningOptions(
            remove_non_ascii=self.ascii,
            remove_control_chars=self.control,
            remove_zero_width=self.zerowidth,
            remove_bom=self.bom,
            normalize_whitespace=self.normalize,
            preserve_newlines=self.preserve_newlines,
            target_line_ending=target,
            strip_format=strip_format,
        )


_FIELD_TYPES = {f.name: f.type for f in fields(CleanfileConfig)}


class ConfigLoader:
    """Load CleanfileConfig from config files in priority order.

    Locations are listed highest priority first; lower-priority files are
    applied first and overridden by higher-priority ones.
    """

    CONFIG_LOCATIONS = [
        Path.home() / ".config" / "cleanfile" / "config.yaml",  # User overrides
        Path.cwd() / ".cleanfile.yaml",                        # Project config
    ]

    def __init__(self, explicit_path: Optional[Path] = None, locations: Optional[list[Path]] = None):
        self.explicit_path = Path(explicit_path) if explicit_path else None
        self.locations = list(self.CONFIG_LOCATIONS if locations is None else locations)

    def candidate_files(self) -> list[Path]:
        """Existing config files, highest priority first."""
        found = [path for path in self.locations if path.is_file()]
        if self.explicit_path is not None:
            if not self.explicit_path.is_file():
                raise ConfigError(f"config file not found: {self.explicit_path}")
            found.insert(0, self.explicit_path)
        return found

    def load(self) -> CleanfileConfig:
        config = CleanfileConfig()
        for path in reversed(self.candidate_files()):
            config = apply_settings(config, read_config_file(path), source=str(path))
            logger.debug("Loaded config from {}", path)
        return config


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse one YAML config file into a mapping."""
    yaml = _get_yaml()
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"could not read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return data


def apply_settings(config: CleanfileConfig, settings: dict[str, Any], source: str = "config") -> CleanfileConfig:
    """Return ``config`` updated with ``settings``, validating each value."""
    updates = {}
    for raw_key, value in settings.items():
        key = str(raw_key).replace("-", "_")
        if key not in _FIELD_TYPES:
            logger.warning("{}: ignoring unknown key '{}'", source, raw_key)
            continue
        expected = bool if _FIELD_TYPES[key] in (bool, "bool") else str
        if expected is str and value is None:
            value = ""
        if not isinstance(value, expected):
            raise ConfigError(
                f"{source}: '{raw_key}' must be a {expected.__name__}, got {type(value).__name__}"
            )
        updates[key] = value

    updated = replace(config, **updates)
    # Validate enum-valued settings early so errors name the file
    try:
        LineEnding.from_name(updated.os)
        StripFormat.from_name(updated.strip)
    except ValueError as e:
        raise ConfigError(f"{source}: {e}") from e
    return updated


def load_config(explicit_path: Optional[Path] = None) -> CleanfileConfig:
    """Load configuration from the standard locations."""
    return ConfigLoader(explicit_path).load()
