"""Plausibility checks for converter parameters.

The calculator itself evaluates its equations on whatever it is given. These
checks are opt-in: pass ``validate=True`` to :func:`smps_tools.compute_summary`
or call :func:`check_params` directly.
"""

from __future__ import annotations

import logging

from .exceptions import ValidationError
from .params import ConverterParams
from .topology import Topology

__all__ = ["validate_params", "check_params"]

logger = logging.getLogger(__name__)

# (attribute, symbol, unit) of every input that must be strictly positive
_POSITIVE_FIELDS = (
    ("vin", "Vin", "V"),
    ("vout", "Vout", "V"),
    ("iout", "Iout", "A"),
    ("freq", "freq", "Hz"),
    ("inductance", "L", "H"),
    ("vin_ripple", "Vin_rpl", "V"),
    ("vout_ripple", "Vout_rpl", "V"),
)


def validate_params(
    params: ConverterParams,
    rin_esr: float = 0.0,
    rout_esr: float = 0.0,
    dt: float | None = None,
) -> list[str]:
    """Check converter inputs for physical plausibility.

    Args:
        params: Converter parameters
        rin_esr: Input capacitor ESR (Ω)
        rout_esr: Output capacitor ESR (Ω)
        dt: Explicit duty cycle, or None

    Returns:
        List of error messages (empty if valid)
    """
    errors: list[str] = []

    topology = Topology.from_string(params.topology)
    if topology is None:
        errors.append(
            f"Unsupported topology '{params.topology_name}' "
            f"(supported: {', '.join(Topology.names())})"
        )

    for attr, symbol, unit in _POSITIVE_FIELDS:
        value = getattr(params, attr)
        if not value > 0:
            errors.append(f"{symbol} must be > 0 {unit} (got {value})")

    if topology is Topology.BOOST and params.vin > 0 and params.vout <= params.vin:
        errors.append(
            f"Vout must be greater than Vin for a boost converter "
            f"(Vin={params.vin}, Vout={params.vout})"
        )

    if rin_esr < 0:
        errors.append(f"Rin_esr must be >= 0 Ω (got {rin_esr})")
    if rout_esr < 0:
        errors.append(f"Rout_esr must be >= 0 Ω (got {rout_esr})")

    if dt is not None and not 0 <= dt < 1:
        errors.append(f"Duty cycle must be in [0, 1) (got {dt})")

    return errors


def check_params(
    params: ConverterParams,
    rin_esr: float = 0.0,
    rout_esr: float = 0.0,
    dt: float | None = None,
) -> None:
    """Raise :class:`ValidationError` if any plausibility check fails."""
    errors = validate_params(params, rin_esr, rout_esr, dt)
    if errors:
        logger.debug(f"Parameter validation found {len(errors)} problem(s)")
        raise ValidationError(
            errors,
            context={"topology": params.topology_name},
            suggestions=["Use --no-validate (or validate=False) to evaluate the equations unchecked"],
        )
