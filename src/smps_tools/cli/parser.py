"""
Argument parser setup for smps-tools CLI.

The parser is organized into one subparser per command.
"""

import argparse

from smps_tools import __version__

__all__ = ["create_parser"]

# Module docstring used as epilog in help
CLI_DOCSTRING = """
Commands:

    smps-tools boost [options]         - Summarize a boost converter from CLI inputs
    smps-tools design <file.yaml>      - Summarize a converter from a design file
    smps-tools config                  - View/manage configuration

Quantities accept SI prefixes and units: 5V, 100mV, 1A, 100kHz, 10uH, 20mΩ, 60%.

Examples:
    smps-tools boost --vin 5V --vout 12V --iout 1A --freq 100kHz -L 10uH \\
        --vin-ripple 100mV --vout-ripple 100mV
    smps-tools boost ... --rout-esr 50mΩ --duty 60% --format json
    smps-tools design boost_5v_12v.yaml
    smps-tools config --init
"""


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the smps-tools CLI."""
    parser = argparse.ArgumentParser(
        prog="smps-tools",
        description="Switchmode power supply design calculators",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=CLI_DOCSTRING,
    )
    parser.add_argument("--version", action="version", version=f"smps-tools {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    _add_boost_parser(subparsers)
    _add_design_parser(subparsers)
    _add_config_parser(subparsers)

    return parser


def _add_summary_options(parser: argparse.ArgumentParser) -> None:
    """Add output and validation options shared by summary commands."""
    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from config, else text)",
    )
    parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        default=None,
        help="Skip plausibility checks and evaluate the equations as-is",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-vv for debug output)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")


def _add_boost_parser(subparsers) -> None:
    """Add boost subcommand parser."""
    boost_parser = subparsers.add_parser(
        "boost",
        help="Summarize a step-up (boost) converter",
        description=(
            "Derive duty cycle, inductor currents, minimum inductor and capacitor "
            "values for a boost converter"
        ),
    )
    boost_parser.add_argument("--vin", required=True, help="Nominal input voltage (e.g., 5V)")
    boost_parser.add_argument("--vout", required=True, help="Desired output voltage (e.g., 12V)")
    boost_parser.add_argument("--iout", required=True, help="Nominal output current (e.g., 1A)")
    boost_parser.add_argument(
        "--freq", required=True, help="PWM switching frequency (e.g., 100kHz)"
    )
    boost_parser.add_argument(
        "--inductance", "-L", required=True, help="Main inductor value (e.g., 10uH)"
    )
    boost_parser.add_argument(
        "--vin-ripple", required=True, help="Acceptable input voltage ripple (e.g., 100mV)"
    )
    boost_parser.add_argument(
        "--vout-ripple", required=True, help="Acceptable output voltage ripple (e.g., 100mV)"
    )
    boost_parser.add_argument(
        "--rin-esr", default=None, help="Input capacitor ESR (e.g., 20mΩ; default: 0)"
    )
    boost_parser.add_argument(
        "--rout-esr", default=None, help="Output capacitor ESR (e.g., 50mΩ; default: 0)"
    )
    boost_parser.add_argument(
        "--duty",
        default=None,
        help="Explicit duty cycle as a fraction or percentage (e.g., 0.6 or 60%%)",
    )
    _add_summary_options(boost_parser)


def _add_design_parser(subparsers) -> None:
    """Add design subcommand parser."""
    design_parser = subparsers.add_parser(
        "design",
        help="Summarize a converter from a YAML design file",
        description="Load a converter design file and print its summary",
    )
    design_parser.add_argument("design_file", help="Path to YAML design file")
    _add_summary_options(design_parser)


def _add_config_parser(subparsers) -> None:
    """Add config subcommand parser."""
    config_parser = subparsers.add_parser("config", help="View/manage configuration")
    action_group = config_parser.add_mutually_exclusive_group()
    action_group.add_argument(
        "--show", action="store_true", help="Show effective configuration with sources"
    )
    action_group.add_argument(
        "--init", action="store_true", help="Create template config file in current directory"
    )
    action_group.add_argument("--paths", action="store_true", help="Show config file paths")
    config_parser.add_argument(
        "--user",
        action="store_true",
        help="Use user config (~/.config/smps-tools/config.toml) for --init",
    )
    config_parser.add_argument(
        "config_action", nargs="?", choices=["get"], help="Config action"
    )
    config_parser.add_argument("config_key", nargs="?", help="Config key (e.g., guide.current_margin)")
