"""Text and JSON rendering of converter summaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .topology import Topology

if TYPE_CHECKING:
    from .summary import BoostSummary

__all__ = ["GuideMargins", "render_report", "summary_to_json"]


@dataclass(frozen=True)
class GuideMargins:
    """Safety factors applied in the component selection guide.

    Attributes:
        inductance: Multiplier on the minimum inductance
        current: Multiplier on inductor RMS and saturation currents
    """

    inductance: float = 1.2
    current: float = 1.1

    @property
    def current_percent(self) -> float:
        return (self.current - 1) * 100


DEFAULT_MARGINS = GuideMargins()


def render_report(summary: BoostSummary, guide: GuideMargins = DEFAULT_MARGINS) -> str:
    """Render a boost converter summary as a fixed-layout text block.

    Inductance and capacitance are shown in µH/µF. The ESR ripple lines are
    only present when the corresponding ESR is non-zero.

    Args:
        summary: Derived converter parameters
        guide: Safety margins for the selection guide

    Returns:
        Multi-line report, newline terminated
    """
    p = summary.params
    s = summary
    topology = Topology.from_string(p.topology)
    title = topology.display_name if topology is not None else p.topology_name

    lines = [
        f"{title} Converter Summary",
        "",
        "Nominal values:",
        "",
        f"\tVin       = {p.vin:.1f} V",
        f"\tVout      = {p.vout:.1f} V",
        f"\tIout      = {p.iout:.3f} A",
        f"\tVin(rpl)  = {p.vin_ripple:.3f} V",
        f"\tVout(rpl) = {p.vout_ripple:.3f} V",
        f"\tIin       = {s.iin_nom:.3f} A",
        f"\tIin(rpl)  = {s.iin_rpl_nom:.3f} A",
        f"\tLmin      = {s.lmin_nom * 1e6:.0f} uH",
        "",
        "Estimated values:",
        "",
        f"\tVout       = {s.vout:.1f} V",
        f"\tDT         = {s.duty_cycle * 100:.0f}%",
        f"\tIout(min)  = {s.iout_min:.3f} A",
        f"\tLmin       = {s.lmin * 1e6:.0f} uH",
        f"\tIcout(rpl) = {s.iout_rpl:.3f} A",
        f"\tIl(pk)     = {s.il_pk:.3f} A",
        f"\tIl(rms)    = {s.il_rms:.3f} A",
        "",
        f"Inductor selection guide ({guide.current_percent:.0f}% margin):",
        "",
        f"\tLmin >= {s.lmin * 1e6 * guide.inductance:.0f} uH",
        f"\tIrms >= {s.il_rms * guide.current:.3f} A",
        f"\tIsat >= {s.il_pk * guide.current:.3f} A",
        "",
        "Capacitor selection guide:",
        "",
        f"\tCin(min)  = {s.cin_min * 1e6:.0f} uF",
    ]
    if s.rin_esr != 0:
        lines.append(f"\tVin(esr)  = {s.vin_esr:.3f} V  ({s.vin_esr + p.vin_ripple:.3f} V)")
    lines.append(f"\tCout(min) = {s.cout_min * 1e6:.0f} uF")
    if s.rout_esr != 0:
        lines.append(f"\tVout(esr) = {s.vout_esr:.3f} V  ({s.vout_esr + p.vout_ripple:.3f} V)")

    return "\n".join(lines) + "\n"


def summary_to_json(summary: BoostSummary) -> dict[str, Any]:
    """Build a JSON-serializable payload for a summary."""
    inputs = summary.params.to_dict()
    topology = inputs.pop("topology")
    return {
        "topology": topology,
        "inputs": inputs,
        "esr": {"Rin_esr": summary.rin_esr, "Rout_esr": summary.rout_esr},
        "duty_cycle": summary.duty_cycle,
        "results": summary.to_dict(),
        "units": type(summary).units(),
    }
