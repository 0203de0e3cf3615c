"""Custom exceptions for heirloom.

Expected absences (missing characters, no heirs, no stored shares) are
reported through provenance tags, not through these types.
"""

from __future__ import annotations

from typing import Any


class HeirloomError(Exception):
    """Base exception for all heirloom errors."""
    pass


# --- Persistence Errors ---

class FlagStoreUnavailableError(HeirloomError):
    """The character flag store cannot be written."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: character flag writer not available")


# --- Parameter Errors ---

class InvalidParameterError(HeirloomError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)

