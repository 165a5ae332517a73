"""Type aliases used across the nuban package."""

from __future__ import annotations

Nuban = str
CheckDigit = int
Digits = tuple[int, ...]
