"""Converter parameter records.

A :class:`ConverterParams` bundles the nominal design inputs of a switchmode
supply. It performs no computation and no validation.

Example::

    from smps_tools import make_boost_config

    params = make_boost_config(5, 12, 1, 100e3, 10e-6, 0.1, 0.1)
    print(params.period)  # 1e-05
"""

from __future__ import annotations

from dataclasses import dataclass

from .topology import Topology

__all__ = ["ConverterParams", "make_boost_config"]


@dataclass(frozen=True)
class ConverterParams:
    """Nominal inputs of a switchmode voltage regulator.

    Attributes:
        topology: Converter topology (a raw string for unrecognized names)
        vin: Nominal input voltage (V)
        vout: Desired output voltage (V)
        iout: Nominal output current (A)
        freq: Frequency of the PWM signal driving the inductor (Hz)
        inductance: Value of the main inductor (H)
        vin_ripple: Acceptable input voltage ripple (V)
        vout_ripple: Acceptable output voltage ripple (V)
    """

    topology: Topology | str
    vin: float
    vout: float
    iout: float
    freq: float
    inductance: float
    vin_ripple: float
    vout_ripple: float

    @property
    def period(self) -> float:
        """Switching period T in seconds."""
        return 1 / self.freq

    @property
    def topology_name(self) -> str:
        if isinstance(self.topology, Topology):
            return self.topology.value
        return str(self.topology)

    def to_dict(self) -> dict[str, float | str]:
        """Return the inputs keyed by their conventional symbol names."""
        return {
            "topology": self.topology_name,
            "Vin": self.vin,
            "Vout": self.vout,
            "Iout": self.iout,
            "freq": self.freq,
            "L": self.inductance,
            "Vin_rpl": self.vin_ripple,
            "Vout_rpl": self.vout_ripple,
        }


def make_boost_config(
    vin: float,
    vout: float,
    iout: float,
    freq: float,
    inductance: float,
    vin_ripple: float,
    vout_ripple: float,
) -> ConverterParams:
    """Create the input parameters of a DC-DC step-up (boost) regulator.

    Args:
        vin: Nominal input voltage (V)
        vout: Desired output voltage (V)
        iout: Nominal output current (A)
        freq: Frequency of the PWM signal driving the inductor (Hz)
        inductance: Value of the main inductor (H)
        vin_ripple: Acceptable input voltage ripple (V)
        vout_ripple: Acceptable output voltage ripple (V)

    Returns:
        ConverterParams tagged with ``Topology.BOOST``
    """
    return ConverterParams(
        topology=Topology.BOOST,
        vin=vin,
        vout=vout,
        iout=iout,
        freq=freq,
        inductance=inductance,
        vin_ripple=vin_ripple,
        vout_ripple=vout_ripple,
    )
