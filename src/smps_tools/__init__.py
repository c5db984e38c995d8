"""
smps-tools: Design calculators for switchmode power supplies.

Derives component requirements for a DC-DC step-up (boost) converter from
its nominal electrical inputs: duty cycle, inductor peak and RMS current,
minimum inductor and capacitor values and ESR-induced ripple.

Modules:
    params: Converter parameter records
    summary: Design equations and derived results
    report: Text and JSON rendering of results
    validation: Plausibility checks on inputs
    units: SI unit string parsing ("10uH", "100kHz")
    design: YAML converter design files
    config: TOML configuration files
    cli: The ``smps-tools`` command

Quick Start::

    from smps_tools import compute_summary, make_boost_config

    params = make_boost_config(5, 12, 1, 100e3, 10e-6, 0.1, 0.1)
    summary, report = compute_summary(params, rin_esr=0.02, rout_esr=0.05)

    print(report)
    print(summary.to_dict()["Il_pk"])
"""

__version__ = "0.1.0"

from smps_tools.design import ConverterDesign, load_design, save_design
from smps_tools.exceptions import (
    ConfigError,
    DesignFileError,
    SmpsToolsError,
    UnsupportedTopologyError,
    ValidationError,
)
from smps_tools.log import disable_verbose, enable_verbose
from smps_tools.params import ConverterParams, make_boost_config
from smps_tools.report import GuideMargins, render_report, summary_to_json
from smps_tools.summary import RESULT_KEYS, BoostSummary, compute_summary, derive_summary
from smps_tools.topology import Topology
from smps_tools.units import format_unit_value, parse_quantity, parse_unit_value
from smps_tools.validation import check_params, validate_params

__all__ = [
    # Version
    "__version__",
    # Parameters
    "Topology",
    "ConverterParams",
    "make_boost_config",
    # Summary
    "BoostSummary",
    "RESULT_KEYS",
    "compute_summary",
    "derive_summary",
    "GuideMargins",
    "render_report",
    "summary_to_json",
    # Validation
    "validate_params",
    "check_params",
    # Units
    "parse_unit_value",
    "parse_quantity",
    "format_unit_value",
    # Design files
    "ConverterDesign",
    "load_design",
    "save_design",
    # Errors
    "SmpsToolsError",
    "UnsupportedTopologyError",
    "ValidationError",
    "DesignFileError",
    "ConfigError",
    # Logging
    "enable_verbose",
    "disable_verbose",
]
