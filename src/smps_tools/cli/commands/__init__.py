"""Command handlers for smps-tools CLI.

- summary: boost and design command handlers
- config: config command handler
"""

from .config import run_config_command
from .summary import run_boost_command, run_design_command

__all__ = [
    "run_boost_command",
    "run_design_command",
    "run_config_command",
]
