"""Supported converter topologies."""

from __future__ import annotations

from enum import Enum


class Topology(str, Enum):
    """Switchmode converter topology.

    Only the step-up (boost) converter has a calculator today.
    """

    BOOST = "boost"

    @property
    def display_name(self) -> str:
        """Human-readable name used in report headings."""
        return _TITLES[self]

    @classmethod
    def from_string(cls, value: str | Topology | None) -> Topology | None:
        """Parse a topology name, case-insensitively.

        Returns None for unknown names.

        Examples:
            >>> Topology.from_string("Boost")
            <Topology.BOOST: 'boost'>
            >>> Topology.from_string("buck") is None
            True
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        return [t.value for t in cls]


_TITLES = {
    Topology.BOOST: "Step-up (Boost)",
}
