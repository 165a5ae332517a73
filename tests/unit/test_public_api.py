"""Tests for the top-level nuban package surface."""

from __future__ import annotations

import nuban


def test_top_level_operations():
    account = nuban.NubanAccount.new("011", "000001457")
    assert nuban.check_digit(account) == 9
    assert nuban.full(account) == "0110000014579"
    assert nuban.is_valid("0110000014579")


def test_all_exports_resolve():
    for name in nuban.__all__:
        assert hasattr(nuban, name)
