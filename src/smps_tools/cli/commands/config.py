"""
Config command handler.

Usage:
    smps-tools config --show       Show effective configuration with sources
    smps-tools config --init       Create template config file
    smps-tools config --paths      Show config file locations
    smps-tools config get <key>    Get a specific config value
"""

from __future__ import annotations

import sys
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING

from smps_tools import config as config_module
from smps_tools.config import CONFIG_FILENAMES, Config, generate_template, get_config_paths

if TYPE_CHECKING:
    from argparse import Namespace

__all__ = ["run_config_command"]

SECTIONS = ("defaults", "summary", "guide")


def run_config_command(args: Namespace, config: Config) -> int:
    """Handle config command."""
    if args.init:
        return _init_config(args.user)
    if args.paths:
        return _show_paths()
    if args.config_action == "get":
        if not args.config_key:
            print("Error: 'get' requires a key argument", file=sys.stderr)
            return 1
        return _get_config(config, args.config_key)
    return _show_config(config)


def _format_value(value) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "# not set"
    return str(value)


def _show_config(config: Config) -> int:
    """Show effective configuration with sources."""
    print("# Effective smps-tools configuration")
    for section in SECTIONS:
        print()
        print(f"[{section}]")
        section_obj = getattr(config, section)
        for f in fields(section_obj):
            source = config.get_source(f"{section}.{f.name}")
            if source != "default":
                source = Path(source).name
            value = _format_value(getattr(section_obj, f.name))
            print(f"{f.name} = {value}  # from: {source}")
    return 0


def _show_paths() -> int:
    """Show config file paths."""
    paths = get_config_paths()

    print(f"User config: {config_module.USER_CONFIG_PATH}")
    print(f"  Status: {'exists' if paths['user'] else 'not found'}")
    print()
    print(f"Project config search: {', '.join(CONFIG_FILENAMES)}")
    if paths["project"]:
        print(f"  Found: {paths['project']}")
    else:
        print("  Status: not found")
    return 0


def _init_config(user: bool = False) -> int:
    """Create a template config file."""
    if user:
        target = config_module.USER_CONFIG_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
    else:
        target = Path.cwd() / CONFIG_FILENAMES[0]

    if target.exists():
        print(f"Error: Config file already exists: {target}", file=sys.stderr)
        return 1

    try:
        target.write_text(generate_template(), encoding="utf-8")
    except OSError as e:
        print(f"Error writing config file: {e}", file=sys.stderr)
        return 1

    print(f"Created config template: {target}")
    return 0


def _get_config(config: Config, key: str) -> int:
    """Get a specific config value."""
    parts = key.split(".")
    if len(parts) != 2:
        print(f"Error: Invalid key format '{key}'. Use 'section.key' format.", file=sys.stderr)
        return 1

    section, attr = parts
    if section not in SECTIONS:
        print(f"Error: Unknown config section '{section}'", file=sys.stderr)
        return 1

    section_obj = getattr(config, section)
    if attr not in {f.name for f in fields(section_obj)}:
        print(f"Error: Unknown key '{attr}' in section '{section}'", file=sys.stderr)
        return 1

    value = getattr(section_obj, attr)
    if isinstance(value, bool):
        print("true" if value else "false")
    else:
        print(value)

    source = config.get_source(key)
    if source != "default":
        print(f"# source: {source}", file=sys.stderr)
    return 0
