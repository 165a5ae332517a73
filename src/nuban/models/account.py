"""NUBAN account value type: bank code plus serial number, without check digit."""

from __future__ import annotations

from pydantic import BaseModel


class NubanAccount(BaseModel):
    """Bank code and serial number of a NUBAN.

    Digits are not checked here; the calculator rejects malformed values when
    a check digit is computed.
    """

    bank_code: str  # conventionally 3 digits, e.g. "011"
    serial_number: str  # conventionally 9 digits, e.g. "000001457"

    model_config = {"frozen": True}

    @classmethod
    def new(cls, bank_code: str, serial_number: str) -> NubanAccount:
        return cls(bank_code=bank_code, serial_number=serial_number)

    @property
    def base(self) -> str:
        """The 12-character bank code + serial number string."""
        return self.bank_code + self.serial_number
