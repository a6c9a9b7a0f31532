from __future__ import annotations

from treeshop.utils.money import ceil_whole, round_currency
from treeshop.utils.validators import is_present, sanitize_text


def test_round_currency_rounds_halves_up():
    assert round_currency(9488.75) == 9489
    assert round_currency(250.5) == 251
    assert round_currency(2.5) == 3
    assert round_currency(1138.65) == 1139
    assert round_currency(1100.4) == 1100


def test_ceil_whole():
    assert ceil_whole(8) == 8
    assert ceil_whole(2.4) == 3
    assert ceil_whole(0.01) == 1


def test_sanitize_text_strips_null_and_trims():
    assert sanitize_text("  hello\x00world  ") == "helloworld"
    assert sanitize_text(None) == ""
    assert is_present(" x ") is True
    assert is_present("  ") is False
