"""
Unit value parsing for converter parameters.

Parses string representations of electrical quantities like "5V", "100mV",
"2A", "10uH", "47µF", "100kHz", "50mΩ" and "60%".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

__all__ = [
    "UnitValue",
    "parse_unit_value",
    "parse_quantity",
    "format_unit_value",
]

# SI prefixes with their multipliers
SI_PREFIXES = {
    "f": 1e-15,  # femto
    "p": 1e-12,  # pico
    "n": 1e-9,  # nano
    "u": 1e-6,  # micro
    "µ": 1e-6,  # micro (micro sign)
    "μ": 1e-6,  # micro (greek mu)
    "m": 1e-3,  # milli
    "": 1,  # no prefix
    "k": 1e3,  # kilo
    "K": 1e3,  # kilo (alternate)
    "M": 1e6,  # mega
    "G": 1e9,  # giga
}

# Unit type mappings - base units and their aliases
UNIT_TYPES = {
    # Voltage
    "V": "V",
    "v": "V",
    "volt": "V",
    "volts": "V",
    # Current
    "A": "A",
    "amp": "A",
    "amps": "A",
    "ampere": "A",
    "amperes": "A",
    # Resistance
    "Ω": "Ω",
    "ohm": "Ω",
    "ohms": "Ω",
    "R": "Ω",
    # Capacitance
    "F": "F",
    "farad": "F",
    "farads": "F",
    # Inductance
    "H": "H",
    "henry": "H",
    "henries": "H",
    # Frequency
    "Hz": "Hz",
    "hz": "Hz",
    "hertz": "Hz",
    # Percentage
    "%": "%",
    "percent": "%",
}


@dataclass
class UnitValue:
    """Parsed unit value with magnitude and unit.

    Attributes:
        raw: Original string representation
        value: Numeric value (with SI prefix applied)
        unit: Normalized unit string (e.g., "V", "A", "Ω"), empty if none
        prefix: SI prefix used (e.g., "m" for milli)
    """

    raw: str
    value: float
    unit: str
    prefix: str = ""

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"UnitValue({self.raw!r}, value={self.value}, unit={self.unit!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, UnitValue):
            return self.value == other.value and self.unit == other.unit
        return False


# Matches: "5V", "100mA", "10k", "4.7µF", "1e-5H", "60%"
UNIT_PATTERN = re.compile(
    r"^"
    r"(?P<sign>[+-])?"
    r"(?P<number>(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
    r"\s*"
    r"(?P<prefix>[fpnuµμmkKMG])?"
    r"(?P<unit>[a-zA-ZΩ%]+)?"
    r"$"
)


def parse_unit_value(value: str) -> UnitValue:
    """Parse a string unit value into structured form.

    Args:
        value: String like "5V", "100mA", "10uH", "100kHz"

    Returns:
        UnitValue with parsed components

    Raises:
        ValueError: If the value cannot be parsed

    Examples:
        >>> parse_unit_value("100mV")
        UnitValue('100mV', value=0.1, unit='V')

        >>> parse_unit_value("100kHz")
        UnitValue('100kHz', value=100000.0, unit='Hz')
    """
    value = value.strip()

    match = UNIT_PATTERN.match(value)
    if not match:
        raise ValueError(f"Cannot parse unit value: {value!r}")

    sign = match.group("sign") or ""
    prefix = match.group("prefix") or ""
    unit_str = match.group("unit") or ""

    number = float(sign + match.group("number"))

    # "1farad" and "1percent" start with a prefix letter
    if unit_str not in UNIT_TYPES and (prefix + unit_str) in UNIT_TYPES:
        unit_str = prefix + unit_str
        prefix = ""

    if unit_str and unit_str not in UNIT_TYPES:
        raise ValueError(f"Unknown unit {unit_str!r} in {value!r}")

    normalized_unit = UNIT_TYPES.get(unit_str, "")

    if normalized_unit == "%" and prefix:
        raise ValueError(f"SI prefix not allowed on percentage: {value!r}")

    return UnitValue(
        raw=value,
        value=number * SI_PREFIXES[prefix],
        unit=normalized_unit,
        prefix=prefix,
    )


def parse_quantity(value: float | int | str, unit: str) -> float:
    """Convert a number or unit string to a float in base units.

    Numbers and unitless strings are taken as already being in ``unit``.
    For ``unit="%"`` the result is a fraction (``"60%"`` gives 0.6), while
    plain numbers are passed through unchanged.

    Args:
        value: Number or string like "10uH"
        unit: Expected normalized unit ("V", "A", "Ω", "F", "H", "Hz", "%")

    Returns:
        Value in base units

    Raises:
        ValueError: If the string cannot be parsed or has a different unit
    """
    if isinstance(value, bool):
        raise ValueError(f"Expected a {unit} quantity, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)

    parsed = parse_unit_value(str(value))
    if parsed.unit and parsed.unit != unit:
        raise ValueError(f"Expected a value in {unit}, got {parsed.raw!r} ({parsed.unit})")
    if parsed.unit == "%":
        return parsed.value / 100
    return parsed.value


def format_unit_value(value: float, unit: str, precision: int = 3) -> str:
    """Format a numeric value with appropriate SI prefix.

    Args:
        value: Numeric value in base units
        unit: Unit string (e.g., "V", "A", "H")
        precision: Significant digits for display

    Returns:
        Formatted string with SI prefix

    Examples:
        >>> format_unit_value(0.001, "A")
        '1mA'

        >>> format_unit_value(1e-5, "H")
        '10μH'
    """
    if value == 0:
        return f"0{unit}"

    abs_value = abs(value)
    sign = "-" if value < 0 else ""

    prefixes = [
        (1e9, "G"),
        (1e6, "M"),
        (1e3, "k"),
        (1, ""),
        (1e-3, "m"),
        (1e-6, "μ"),
        (1e-9, "n"),
        (1e-12, "p"),
        (1e-15, "f"),
    ]

    for threshold, prefix in prefixes:
        if abs_value >= threshold * (1 - 1e-9):
            scaled = round(abs_value / threshold, 9)
            if scaled == int(scaled):
                return f"{sign}{int(scaled)}{prefix}{unit}"
            formatted = f"{scaled:.{precision}g}"
            return f"{sign}{formatted}{prefix}{unit}"

    # Very small value
    return f"{sign}{value:.{precision}g}{unit}"
