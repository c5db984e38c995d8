"""Derived parameters of a switchmode converter.

Evaluates the closed-form design equations for a converter described by
:class:`~smps_tools.params.ConverterParams` and renders the results as a
text report.

Example::

    from smps_tools import compute_summary, make_boost_config

    params = make_boost_config(5, 12, 1, 100e3, 10e-6, 0.1, 0.1)
    summary, report = compute_summary(params, rout_esr=0.05)
    print(f"Il(pk) = {summary.il_pk:.3f} A")
    print(report)

The equations assume continuous conduction mode (CCM) and ideal switches.
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass, field, fields
from typing import Callable

from .exceptions import UnsupportedTopologyError
from .params import ConverterParams
from .report import render_report
from .topology import Topology
from .validation import check_params

__all__ = [
    "BoostSummary",
    "RESULT_KEYS",
    "compute_summary",
    "derive_summary",
]

logger = logging.getLogger(__name__)


def _result(key: str, unit: str):
    return field(metadata={"key": key, "unit": unit})


@dataclass
class BoostSummary:
    """Derived parameters of a step-up (boost) converter.

    Quantities are in SI base units (A, V, H, F). ``vout`` is the output
    voltage recomputed from the duty cycle, which differs from
    ``params.vout`` when an explicit duty cycle was supplied.
    """

    iin_nom: float = _result("Iin_nom", "A")
    iin_rpl_nom: float = _result("Iin_rpl_nom", "A")
    lmin_nom: float = _result("Lmin_nom", "H")
    vout: float = _result("Vout", "V")
    iout_min: float = _result("Iout_min", "A")
    iout_rpl: float = _result("Iout_rpl", "A")
    il_pk: float = _result("Il_pk", "A")
    il_rpl: float = _result("Il_rpl", "A")
    il_rms: float = _result("Il_rms", "A")
    lmin: float = _result("Lmin", "H")
    cin_min: float = _result("Cin_min", "F")
    vin_esr: float = _result("Vin_esr", "V")
    cout_min: float = _result("Cout_min", "F")
    vout_esr: float = _result("Vout_esr", "V")

    # Inputs the results were computed from
    params: ConverterParams = field(repr=False)
    duty_cycle: float = 0.0
    rin_esr: float = 0.0
    rout_esr: float = 0.0

    def to_dict(self) -> dict[str, float]:
        """Return the derived results keyed by symbol name (``Il_pk``, ...)."""
        return {f.metadata["key"]: getattr(self, f.name) for f in _RESULT_FIELDS}

    @classmethod
    def units(cls) -> dict[str, str]:
        """Map each result symbol to its SI unit."""
        return {f.metadata["key"]: f.metadata["unit"] for f in _RESULT_FIELDS}


_RESULT_FIELDS = tuple(f for f in fields(BoostSummary) if "key" in f.metadata)

RESULT_KEYS = tuple(f.metadata["key"] for f in _RESULT_FIELDS)


def _derive_boost(
    params: ConverterParams,
    rin_esr: float,
    rout_esr: float,
    dt: float | None,
) -> BoostSummary:
    """Evaluate the step-up (boost) converter equations."""
    vin = params.vin
    iout = params.iout
    freq = params.freq
    L = params.inductance
    T = params.period

    # Duty cycle OFF time
    if dt is None:
        toff = (vin / params.vout) * T
    else:
        toff = T * (1 - dt)

    # Nominal values use the configured output voltage
    iin_nom = iout * (params.vout / vin)
    iin_rpl_nom = (T / L) * vin * (1 - (vin / params.vout))
    lmin_nom = (T / (2 * iout)) * (params.vout - vin) * ((vin / params.vout) ** 2)

    # Output voltage given the duty cycle
    vout = vin * (T / toff)

    # Voltage ratios
    di = vin / vout
    d = 1 - di

    # Minimum output current to stay in CCM
    iout_min = (T / (2 * L)) * vout * d * (di**2)

    iout_rpl = iout / di
    il_pk = (iout / di) + (T / (2 * L)) * d * vin
    il_rpl = (T / L) * vin * d
    il_rms = math.sqrt(((iout / di) ** 2) + ((il_rpl**2) / 12))

    lmin = (T / (2 * iout)) * (vout - vin) * (di**2)

    cin_min = il_rpl / (8 * params.vin_ripple * freq)
    vin_esr = il_rpl * rin_esr

    cout_min = (iout * d) / (params.vout_ripple * freq)
    vout_esr = ((iout / di) + (il_rpl / 2)) * rout_esr

    return BoostSummary(
        iin_nom=iin_nom,
        iin_rpl_nom=iin_rpl_nom,
        lmin_nom=lmin_nom,
        vout=vout,
        iout_min=iout_min,
        iout_rpl=iout_rpl,
        il_pk=il_pk,
        il_rpl=il_rpl,
        il_rms=il_rms,
        lmin=lmin,
        cin_min=cin_min,
        vin_esr=vin_esr,
        cout_min=cout_min,
        vout_esr=vout_esr,
        params=params,
        duty_cycle=1 - (toff / T),
        rin_esr=rin_esr,
        rout_esr=rout_esr,
    )


# Calculator for each supported topology
_CALCULATORS: dict[Topology, Callable[..., BoostSummary]] = {
    Topology.BOOST: _derive_boost,
}


def derive_summary(
    params: ConverterParams,
    rin_esr: float = 0.0,
    rout_esr: float = 0.0,
    dt: float | None = None,
    *,
    validate: bool = False,
) -> BoostSummary:
    """Compute the derived parameters of a converter.

    Args:
        params: Converter parameters
        rin_esr: Input capacitor ESR in ohms (0 disables ESR modelling)
        rout_esr: Output capacitor ESR in ohms (0 disables ESR modelling)
        dt: Explicit duty cycle in [0, 1). When None the duty cycle follows
            from the nominal Vin/Vout ratio.
        validate: Run :func:`~smps_tools.validation.check_params` first

    Returns:
        Derived results for the converter

    Raises:
        UnsupportedTopologyError: If the topology has no calculator
        ValidationError: If ``validate`` is set and a check fails
    """
    topology = Topology.from_string(params.topology)
    calculator = _CALCULATORS.get(topology) if topology is not None else None
    if calculator is None:
        raise UnsupportedTopologyError(params.topology_name, supported=Topology.names())

    if validate:
        check_params(params, rin_esr, rout_esr, dt)

    logger.debug(
        f"Deriving {topology.value} summary: Vin={params.vin} V, Vout={params.vout} V, "
        f"Iout={params.iout} A, freq={params.freq} Hz, dt={dt}"
    )
    return calculator(params, rin_esr, rout_esr, dt)


def compute_summary(
    params: ConverterParams,
    rin_esr: float = 0.0,
    rout_esr: float = 0.0,
    dt: float | None = None,
    *,
    validate: bool = False,
    echo: bool = False,
) -> tuple[BoostSummary | None, str]:
    """Compute the derived parameters and render the summary report.

    Unlike :func:`derive_summary`, an unsupported topology is not raised:
    the result is ``(None, diagnostic)`` and a warning is logged.

    Args:
        params: Converter parameters
        rin_esr: Input capacitor ESR in ohms
        rout_esr: Output capacitor ESR in ohms
        dt: Explicit duty cycle in [0, 1), or None
        validate: Run plausibility checks before computing
        echo: Also write the report (or diagnostic) to stdout

    Returns:
        Tuple of (summary or None, report text)
    """
    try:
        summary = derive_summary(params, rin_esr, rout_esr, dt, validate=validate)
    except UnsupportedTopologyError as e:
        logger.warning(e.message)
        text = e.message + "\n"
        summary = None
    else:
        text = render_report(summary)

    if echo:
        sys.stdout.write(text)
    return summary, text
