"""NUBAN exception hierarchy."""

from __future__ import annotations


class NubanError(Exception):
    """Base exception for all NUBAN errors."""


class InvalidLengthError(NubanError, ValueError):
    """Account digits are not the required length."""

    def __init__(self, expected: int, actual: int, field: str = "nuban") -> None:
        self.expected = expected
        self.actual = actual
        self.field = field
        super().__init__(f"Invalid {field} length: expected {expected} characters, got {actual}")


class InvalidDigitError(NubanError, ValueError):
    """A character in a required position is not an ASCII decimal digit."""

    def __init__(self, position: int, character: str) -> None:
        self.position = position
        self.character = character
        super().__init__(f"Invalid character {character!r} at position {position}; expected a digit 0-9")


InvalidLength = InvalidLengthError
InvalidDigit = InvalidDigitError
