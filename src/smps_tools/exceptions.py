"""
Custom exception hierarchy for smps-tools.

Every exception carries a message, a context dictionary and a list of
suggestions, all rendered into ``str(err)``.

Example::

    from smps_tools.exceptions import ValidationError

    errors = ["Vin must be > 0 (got 0)", "Vout must be > Vin for a boost converter"]
    raise ValidationError(errors, context={"topology": "boost"})
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class SmpsToolsError(Exception):
    """
    Base exception for all smps-tools errors.

    Attributes:
        context: Dictionary of contextual information (topology, file, ...)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class UnsupportedTopologyError(SmpsToolsError):
    """
    Converter topology has no calculator.

    Example::

        raise UnsupportedTopologyError("buck", supported=["boost"])

    Attributes:
        topology: The rejected topology name
    """

    def __init__(
        self,
        topology: Any,
        supported: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.topology = topology
        ctx = dict(context or {})
        suggestions = []
        if supported:
            ctx.setdefault("supported", ", ".join(supported))
            suggestions.append(f"Use one of: {', '.join(supported)}")
        super().__init__(f"Invalid SMPS topology: {topology}", ctx, suggestions)


class ValidationError(SmpsToolsError):
    """
    Converter parameters failed one or more plausibility checks.

    Collects all problems instead of failing on the first one.

    Attributes:
        errors: List of individual validation error messages
    """

    def __init__(
        self,
        errors: List[str],
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.errors = errors
        message = f"Validation failed with {len(errors)} error(s):\n"
        message += "\n".join(f"  {i + 1}. {e}" for i, e in enumerate(errors))
        super().__init__(message, context, suggestions)


class DesignFileError(SmpsToolsError):
    """
    Converter design file cannot be read or parsed.

    Example::

        raise DesignFileError(
            "Invalid YAML",
            file_path="boost.yaml",
            suggestions=["Check indentation"],
        )
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        file_path: Optional[Any] = None,
    ):
        ctx = context or {}
        if file_path and "file" not in ctx:
            ctx["file"] = str(file_path)
        super().__init__(message, ctx, suggestions)


class ConfigError(SmpsToolsError):
    """Configuration-related errors."""

    pass


__all__ = [
    "SmpsToolsError",
    "UnsupportedTopologyError",
    "ValidationError",
    "DesignFileError",
    "ConfigError",
]
