from decimal import Decimal

import pytest

from hovenier.engine.rounding import ceil_int, money, pct1, percentage_of, round_to_quarter

D = Decimal


@pytest.mark.parametrize(
    "hours, expected",
    [
        ("0", "0.00"),
        ("0.283", "0.25"),
        ("0.375", "0.50"),  # half-up
        ("1.2828", "1.25"),
        ("9.75", "9.75"),
        ("8.124", "8.00"),
        ("8.125", "8.25"),
    ],
)
def test_round_to_quarter(hours, expected):
    assert round_to_quarter(D(hours)) == D(expected)


def test_round_to_quarter_is_idempotent():
    for h in ("0.1", "1.13", "2.6", "7.874", "12.5"):
        once = round_to_quarter(D(h))
        assert round_to_quarter(once) == once


def test_money_and_pct1_half_up():
    assert money(D("2.345")) == D("2.35")
    assert money(D("377.995")) == D("378.00")
    assert pct1(D("15.05")) == D("15.1")
    assert pct1(D("-4.95")) == D("-5.0")


def test_percentage_of_is_unrounded():
    assert percentage_of(D("1"), D("3")) > D("33.33")
    assert percentage_of(D("6"), D("40")) == D("15")


def test_ceil_int():
    assert ceil_int(D("8.33")) == 9
    assert ceil_int(D("2")) == 2
    assert ceil_int(D("0.01")) == 1
