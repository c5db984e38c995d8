"""
Converter design files.

A design file is a YAML mapping describing one converter. Every quantity is
either a number in SI base units or a unit string::

    name: 5V to 12V boost
    topology: boost
    input:
      voltage: 5V
      ripple: 100mV
    output:
      voltage: 12V
      current: 1A
      ripple: 100mV
    switching:
      frequency: 100kHz
      duty_cycle: 60%      # optional
    inductor:
      inductance: 10uH
    capacitors:            # optional
      input_esr: 20mΩ
      output_esr: 50mΩ
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from .exceptions import DesignFileError
from .params import ConverterParams
from .topology import Topology
from .units import parse_quantity

__all__ = [
    "ConverterDesign",
    "InputSpec",
    "OutputSpec",
    "SwitchingSpec",
    "InductorSpec",
    "CapacitorSpec",
    "load_design",
    "save_design",
]

logger = logging.getLogger(__name__)


class InputSpec(BaseModel):
    """Converter input side."""

    voltage: float = Field(..., description="Nominal input voltage (V)")
    ripple: float = Field(..., description="Acceptable input voltage ripple (V)")

    @field_validator("voltage", "ripple", mode="before")
    @classmethod
    def parse_volts(cls, v: Any) -> float:
        return parse_quantity(v, "V")


class OutputSpec(BaseModel):
    """Converter output side."""

    voltage: float = Field(..., description="Desired output voltage (V)")
    current: float = Field(..., description="Nominal output current (A)")
    ripple: float = Field(..., description="Acceptable output voltage ripple (V)")

    @field_validator("voltage", "ripple", mode="before")
    @classmethod
    def parse_volts(cls, v: Any) -> float:
        return parse_quantity(v, "V")

    @field_validator("current", mode="before")
    @classmethod
    def parse_amps(cls, v: Any) -> float:
        return parse_quantity(v, "A")


class SwitchingSpec(BaseModel):
    """PWM switching parameters."""

    frequency: float = Field(..., description="Switching frequency (Hz)")
    duty_cycle: float | None = Field(
        default=None, description="Explicit duty cycle as a fraction or percentage"
    )

    @field_validator("frequency", mode="before")
    @classmethod
    def parse_hertz(cls, v: Any) -> float:
        return parse_quantity(v, "Hz")

    @field_validator("duty_cycle", mode="before")
    @classmethod
    def parse_duty(cls, v: Any) -> float | None:
        if v is None:
            return None
        return parse_quantity(v, "%")


class InductorSpec(BaseModel):
    """Main inductor."""

    inductance: float = Field(..., description="Inductor value (H)")

    @field_validator("inductance", mode="before")
    @classmethod
    def parse_henries(cls, v: Any) -> float:
        return parse_quantity(v, "H")


class CapacitorSpec(BaseModel):
    """Input and output capacitor parasitics."""

    input_esr: float | None = Field(default=None, description="Input capacitor ESR (Ω)")
    output_esr: float | None = Field(default=None, description="Output capacitor ESR (Ω)")

    @field_validator("input_esr", "output_esr", mode="before")
    @classmethod
    def parse_ohms(cls, v: Any) -> float | None:
        if v is None:
            return None
        return parse_quantity(v, "Ω")


class ConverterDesign(BaseModel):
    """Root model of a converter design file."""

    name: str | None = Field(default=None, description="Design name")
    description: str | None = Field(default=None, description="Free-form notes")
    topology: str = Field(default=Topology.BOOST.value, description="Converter topology")
    input: InputSpec
    output: OutputSpec
    switching: SwitchingSpec
    inductor: InductorSpec
    capacitors: CapacitorSpec = Field(default_factory=CapacitorSpec)

    def to_params(self) -> ConverterParams:
        """Build the converter parameter record for this design."""
        topology = Topology.from_string(self.topology) or self.topology
        return ConverterParams(
            topology=topology,
            vin=self.input.voltage,
            vout=self.output.voltage,
            iout=self.output.current,
            freq=self.switching.frequency,
            inductance=self.inductor.inductance,
            vin_ripple=self.input.ripple,
            vout_ripple=self.output.ripple,
        )

    def summary_options(self, rin_esr: float = 0.0, rout_esr: float = 0.0) -> dict[str, Any]:
        """Keyword arguments for :func:`smps_tools.compute_summary`.

        Args:
            rin_esr: Input ESR used when the design file leaves it unset
            rout_esr: Output ESR used when the design file leaves it unset
        """
        caps = self.capacitors
        return {
            "rin_esr": rin_esr if caps.input_esr is None else caps.input_esr,
            "rout_esr": rout_esr if caps.output_esr is None else caps.output_esr,
            "dt": self.switching.duty_cycle,
        }


def load_design(path: Path | str) -> ConverterDesign:
    """Load a converter design file.

    Args:
        path: Path to the YAML design file

    Returns:
        Parsed ConverterDesign

    Raises:
        DesignFileError: If the file is missing, empty, or not a YAML mapping
        pydantic.ValidationError: If the content doesn't match the schema
    """
    path = Path(path)

    if not path.exists():
        raise DesignFileError(
            f"Design file not found: {path}",
            file_path=path,
            suggestions=["Check the path", "Create one from the example in the README"],
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DesignFileError(f"Cannot read design file: {e}", file_path=path) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DesignFileError(f"Invalid YAML in {path}: {e}", file_path=path) from e

    if data is None:
        raise DesignFileError(f"Empty design file: {path}", file_path=path)

    if not isinstance(data, dict):
        raise DesignFileError(f"Design file must contain a YAML mapping: {path}", file_path=path)

    design = ConverterDesign.model_validate(data)
    logger.info(f"Loaded design {design.name or path.name!r} ({design.topology})")
    return design


def save_design(design: ConverterDesign, path: Path | str) -> None:
    """Write a design back out as YAML, with quantities in SI base units."""
    path = Path(path)
    data = design.model_dump(exclude_none=True)
    path.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
