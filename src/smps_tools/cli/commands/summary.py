"""Summary command handlers: boost and design."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as SchemaError

from smps_tools.design import load_design
from smps_tools.exceptions import SmpsToolsError
from smps_tools.params import ConverterParams, make_boost_config
from smps_tools.report import render_report, summary_to_json
from smps_tools.summary import derive_summary
from smps_tools.units import format_unit_value, parse_quantity

if TYPE_CHECKING:
    from argparse import Namespace

    from smps_tools.config import Config

__all__ = ["run_boost_command", "run_design_command"]

logger = logging.getLogger(__name__)


def run_boost_command(args: Namespace, config: Config) -> int:
    """Handle boost command."""
    try:
        params = make_boost_config(
            parse_quantity(args.vin, "V"),
            parse_quantity(args.vout, "V"),
            parse_quantity(args.iout, "A"),
            parse_quantity(args.freq, "Hz"),
            parse_quantity(args.inductance, "H"),
            parse_quantity(args.vin_ripple, "V"),
            parse_quantity(args.vout_ripple, "V"),
        )
        options = {
            "rin_esr": _esr(args.rin_esr, config.summary.rin_esr),
            "rout_esr": _esr(args.rout_esr, config.summary.rout_esr),
            "dt": parse_quantity(args.duty, "%") if args.duty is not None else None,
        }
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return _print_summary(args, config, params, options)


def run_design_command(args: Namespace, config: Config) -> int:
    """Handle design command."""
    try:
        design = load_design(args.design_file)
    except SmpsToolsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except SchemaError as e:
        print(f"Error: Invalid design file {args.design_file}:\n{e}", file=sys.stderr)
        return 1

    try:
        options = design.summary_options(
            rin_esr=_esr(None, config.summary.rin_esr),
            rout_esr=_esr(None, config.summary.rout_esr),
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return _print_summary(args, config, design.to_params(), options, design.name)


def _esr(value: str | None, default: float | str) -> float:
    """Resolve an ESR option against its config default."""
    return parse_quantity(value if value is not None else default, "Ω")


def _print_summary(
    args: Namespace,
    config: Config,
    params: ConverterParams,
    options: dict[str, Any],
    title: str | None = None,
) -> int:
    """Compute a summary and print it in the requested format."""
    validate = config.summary.validate if args.validate is None else args.validate
    fmt = args.format or config.defaults.format

    try:
        summary = derive_summary(params, validate=validate, **options)
    except SmpsToolsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ZeroDivisionError:
        print(
            "Error: Division by zero while evaluating the design equations; "
            "check for zero-valued inputs",
            file=sys.stderr,
        )
        return 1

    if fmt == "json":
        data = summary_to_json(summary)
        if title:
            data["name"] = title
        print(json.dumps(data, indent=2))
        return 0

    from rich.console import Console
    from rich.markup import escape

    console = Console()
    if title:
        console.print(f"\n[bold]{escape(title)}[/bold]")
    console.print(
        "[dim]"
        f"Vin={format_unit_value(params.vin, 'V')}  "
        f"Vout={format_unit_value(params.vout, 'V')}  "
        f"Iout={format_unit_value(params.iout, 'A')}  "
        f"f={format_unit_value(params.freq, 'Hz')}  "
        f"L={format_unit_value(params.inductance, 'H')}"
        "[/dim]\n"
    )
    console.print(
        render_report(summary, config.guide.margins()),
        markup=False,
        highlight=False,
        end="",
    )
    logger.info(f"Il(pk) = {summary.il_pk:.3f} A, Il(rms) = {summary.il_rms:.3f} A")
    return 0
