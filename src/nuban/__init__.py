"""Nigerian Uniform Bank Account Number (NUBAN) check-digit generation and validation."""

from __future__ import annotations

from nuban.calculator import NubanCalculator, check_digit, full, is_valid, split
from nuban.core.config import NubanSettings
from nuban.core.exceptions import (
    InvalidDigit,
    InvalidDigitError,
    InvalidLength,
    InvalidLengthError,
    NubanError,
)
from nuban.core.logging_config import configure_logging
from nuban.models.account import NubanAccount

__all__ = [
    "InvalidDigit",
    "InvalidDigitError",
    "InvalidLength",
    "InvalidLengthError",
    "NubanAccount",
    "NubanCalculator",
    "NubanError",
    "NubanSettings",
    "check_digit",
    "configure_logging",
    "full",
    "is_valid",
    "split",
]
