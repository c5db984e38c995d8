"""
Configuration file support for smps-tools.

Provides hierarchical configuration loading from:
1. Project config: .smps-tools.toml or smps-tools.toml in project root
2. User config: ~/.config/smps-tools/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

from __future__ import annotations

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .report import GuideMargins

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

__all__ = [
    "CONFIG_FILENAMES",
    "USER_CONFIG_PATH",
    "Config",
    "ConfigError",
    "DefaultsConfig",
    "GuideConfig",
    "SummaryConfig",
    "generate_template",
    "get_config_paths",
]

# Config file names to search for in project directories
CONFIG_FILENAMES = [".smps-tools.toml", "smps-tools.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "smps-tools" / "config.toml"

# All known config keys, with the types each accepts
KNOWN_KEYS: dict[str, dict[str, tuple[type, ...]]] = {
    "defaults": {"format": (str,), "verbose": (bool,), "quiet": (bool,)},
    "summary": {"validate": (bool,), "rin_esr": (int, float, str), "rout_esr": (int, float, str)},
    "guide": {"inductance_margin": (int, float), "current_margin": (int, float)},
}

# Keys restricted to a fixed set of values
KEY_CHOICES: dict[str, tuple[str, ...]] = {
    "defaults.format": ("text", "json"),
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    format: str = "text"
    verbose: bool = False
    quiet: bool = False


@dataclass
class SummaryConfig:
    """Defaults for summary calculations.

    ESR values may be numbers in ohms or unit strings such as "20mΩ".
    """

    validate: bool = True
    rin_esr: float | str = 0.0
    rout_esr: float | str = 0.0


@dataclass
class GuideConfig:
    """Selection guide safety margins."""

    inductance_margin: float = 1.2
    current_margin: float = 1.1

    def margins(self) -> GuideMargins:
        return GuideMargins(inductance=self.inductance_margin, current=self.current_margin)


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    summary: SummaryConfig = field(default_factory=SummaryConfig)
    guide: GuideConfig = field(default_factory=GuideConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> Config:
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object

        Raises:
            ConfigError: If a config file is unreadable or not valid TOML
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            _merge_config(config, _load_toml_file(USER_CONFIG_PATH), str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            _merge_config(config, _load_toml_file(project_config), str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at a .git directory or the filesystem root.
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Raises:
        ConfigError: If TOML is invalid or the file cannot be read
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", context={"file": str(path)}) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", context={"file": str(path)}) from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Unknown sections and keys produce a warning and are ignored. A known key
    holding a value of the wrong type is a ConfigError.
    """
    for section_name, section_data in data.items():
        known = KNOWN_KEYS.get(section_name)
        if known is None:
            warnings.warn(f"Unknown config key '{section_name}' in {source}", stacklevel=3)
            continue
        if not isinstance(section_data, dict):
            raise ConfigError(
                f"Config section [{section_name}] must be a table",
                context={"file": source},
            )

        section = getattr(config, section_name)
        for key, value in section_data.items():
            if key not in known:
                warnings.warn(
                    f"Unknown config key '{section_name}.{key}' in {source}", stacklevel=3
                )
                continue
            allowed = known[key]
            # bool is an int subclass; only accept it where bool is declared
            if (isinstance(value, bool) and bool not in allowed) or not isinstance(value, allowed):
                raise ConfigError(
                    f"Invalid value for '{section_name}.{key}': {value!r}",
                    context={"file": source, "expected": "/".join(t.__name__ for t in allowed)},
                )
            choices = KEY_CHOICES.get(f"{section_name}.{key}")
            if choices is not None and value not in choices:
                raise ConfigError(
                    f"Invalid value for '{section_name}.{key}': {value!r}",
                    context={"file": source, "expected": " | ".join(choices)},
                )
            setattr(section, key, value)
            sources[f"{section_name}.{key}"] = source


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# smps-tools configuration file
# Place as .smps-tools.toml in project root or ~/.config/smps-tools/config.toml for user defaults

[defaults]
# Output format: text, json
# format = "text"

# Enable verbose (INFO) logging by default
# verbose = false

# Only report errors
# quiet = false

[summary]
# Check inputs for physical plausibility before computing
# validate = true

# Default capacitor ESR, in ohms or as a unit string ("20mΩ")
# rin_esr = 0.0
# rout_esr = 0.0

[guide]
# Safety factor applied to the minimum inductance
# inductance_margin = 1.2

# Safety factor applied to inductor RMS and saturation currents
# current_margin = 1.1
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": _find_project_config(Path.cwd()),
    }
