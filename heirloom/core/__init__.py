"""Logging, settings and exceptions shared by every heirloom module."""

from .exceptions import (
    FlagStoreUnavailableError,
    HeirloomError,
    InvalidParameterError,
)
from .settings import SHARES_FLAG_NAME, HeirloomSettings, get_settings

__all__ = [
    "HeirloomSettings",
    "get_settings",
    "SHARES_FLAG_NAME",
    # Exceptions
    "HeirloomError",
    "FlagStoreUnavailableError",
    "InvalidParameterError",
]
