"""
Core module initialization.
Exports configuration, logging and error utilities.
"""

from elsabor.core.config import get_settings, setup_logging, Settings, EnvironmentMode
from elsabor.core.exceptions import (
    SiteError,
    UnsupportedLanguage,
    InvalidSubmission,
    InvalidReservationSlot,
    DispatchError,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "Settings",
    "EnvironmentMode",
    "SiteError",
    "UnsupportedLanguage",
    "InvalidSubmission",
    "InvalidReservationSlot",
    "DispatchError",
]
