"""
Command-line interface for smps-tools.

Provides the ``smps-tools`` (alias ``smps``) command:

    smps-tools boost [options]     - Summarize a boost converter
    smps-tools design <file.yaml>  - Summarize a converter design file
    smps-tools config              - View/manage configuration
"""

from __future__ import annotations

import sys
import warnings

from smps_tools.config import Config
from smps_tools.exceptions import ConfigError
from smps_tools.log import enable_verbose, level_for_verbosity

from .commands import run_boost_command, run_config_command, run_design_command
from .parser import create_parser

__all__ = ["main"]

COMMANDS = {
    "boost": run_boost_command,
    "design": run_design_command,
    "config": run_config_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for smps-tools CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            config = Config.load()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for w in caught:
        print(f"Warning: {w.message}", file=sys.stderr)

    verbose = getattr(args, "verbose", 0) or int(config.defaults.verbose)
    quiet = getattr(args, "quiet", False) or config.defaults.quiet
    enable_verbose(level_for_verbosity(verbose, quiet))

    return COMMANDS[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
