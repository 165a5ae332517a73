"""NubanCalculator: check-digit generation and validation for NUBANs.

The check digit is a weighted sum over the 12 base digits, taken modulo 10:

    weighted = 3*(d0+d2+d3+d5+d6+d8+d9+d11) + 7*(d1+d4+d7+d10)
    check_digit = (10 - weighted % 10) % 10
"""

from __future__ import annotations

import logging

from nuban.core.config import NubanSettings
from nuban.core.exceptions import InvalidDigitError, InvalidLengthError
from nuban.core.types import CheckDigit, Digits, Nuban
from nuban.models.account import NubanAccount

logger = logging.getLogger(__name__)

BANK_CODE_LENGTH = 3
SERIAL_NUMBER_LENGTH = 9
BASE_LENGTH = BANK_CODE_LENGTH + SERIAL_NUMBER_LENGTH
NUBAN_LENGTH = BASE_LENGTH + 1

WEIGHTS = (3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3)

_ASCII_DIGITS = "0123456789"


def _to_digits(value: str, expected: int, field: str) -> Digits:
    if len(value) != expected:
        logger.debug("Rejected %s: length %d != %d", field, len(value), expected)
        raise InvalidLengthError(expected, len(value), field)

    digits = []
    for position, character in enumerate(value):
        if character not in _ASCII_DIGITS:
            logger.debug("Rejected %s: non-digit at position %d", field, position)
            raise InvalidDigitError(position, character)
        digits.append(ord(character) - ord("0"))
    return tuple(digits)


class NubanCalculator:
    """Stateless NUBAN check-digit service.

    Settings are injected at construction time; every method is a pure
    function of its arguments and is safe to call from multiple threads.
    """

    def __init__(self, *, settings: NubanSettings | None = None) -> None:
        # Field defaults only; NUBAN_* variables apply through injected settings
        self._settings = settings if settings is not None else NubanSettings.model_construct()

    def parse_digits(self, account: NubanAccount) -> Digits:
        """Validate an account and return its 12 base digits.

        Raises:
            InvalidLengthError: Base is not 12 characters, or (with
                ``strict_widths``) the bank code / serial number widths are off.
            InvalidDigitError: A base character is not an ASCII digit.
        """
        if self._settings.strict_widths:
            if len(account.bank_code) != BANK_CODE_LENGTH:
                raise InvalidLengthError(BANK_CODE_LENGTH, len(account.bank_code), "bank_code")
            if len(account.serial_number) != SERIAL_NUMBER_LENGTH:
                raise InvalidLengthError(
                    SERIAL_NUMBER_LENGTH, len(account.serial_number), "serial_number"
                )
        return _to_digits(account.base, BASE_LENGTH, "bank_code+serial_number")

    def check_digit(self, account: NubanAccount) -> CheckDigit:
        """Return the check digit (0-9) for an account."""
        digits = self.parse_digits(account)
        weighted = sum(weight * digit for weight, digit in zip(WEIGHTS, digits))
        result = (10 - weighted % 10) % 10
        logger.debug("Computed check digit %d for %d-digit base", result, len(digits))
        return result

    def full(self, account: NubanAccount) -> Nuban:
        """Return the 13-character NUBAN: bank code, serial number, check digit."""
        return account.bank_code + account.serial_number + str(self.check_digit(account))

    def split(self, nuban: Nuban) -> tuple[NubanAccount, CheckDigit]:
        """Split a 13-character NUBAN into its account and trailing check digit."""
        digits = _to_digits(nuban, NUBAN_LENGTH, "nuban")
        account = NubanAccount.new(
            nuban[:BANK_CODE_LENGTH], nuban[BANK_CODE_LENGTH:BASE_LENGTH]
        )
        return account, digits[-1]

    def is_valid(self, nuban: Nuban) -> bool:
        """Return whether a 13-character NUBAN carries the correct check digit.

        Malformed input raises instead of returning ``False``.
        """
        account, given = self.split(nuban)
        return self.check_digit(account) == given


_default = NubanCalculator()


def check_digit(account: NubanAccount) -> CheckDigit:
    return _default.check_digit(account)


def full(account: NubanAccount) -> Nuban:
    return _default.full(account)


def split(nuban: Nuban) -> tuple[NubanAccount, CheckDigit]:
    return _default.split(nuban)


def is_valid(nuban: Nuban) -> bool:
    return _default.is_valid(nuban)
