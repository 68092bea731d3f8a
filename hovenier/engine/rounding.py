from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

D = Decimal

CENT = D("0.01")
TENTH = D("0.1")


def round_to_quarter(hours: D) -> D:
    """
    Afronden op kwartieren: round(h * 4) / 4, half-up.
    Alleen gebruiken waar uren een regel/weergave in gaan, niet tussendoor.
    Idempotent: round_to_quarter(round_to_quarter(h)) == round_to_quarter(h).
    """
    quarters = (D(hours) * 4).quantize(D("1"), rounding=ROUND_HALF_UP)
    return (quarters / 4).quantize(CENT)


def money(value: D) -> D:
    return D(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round2(value: D) -> D:
    return D(value).quantize(CENT, rounding=ROUND_HALF_UP)


def round3(value: D) -> D:
    return D(value).quantize(D("0.001"), rounding=ROUND_HALF_UP)


def pct1(value: D) -> D:
    """Percentage op 1 decimaal (round(x * 10) / 10)."""
    return D(value).quantize(TENTH, rounding=ROUND_HALF_UP)


def percentage_of(part: D, whole: D) -> D:
    # ongerond; aanroeper bepaalt wanneer afgerond wordt
    return D(part) / D(whole) * D("100")


def ceil_int(value: D) -> int:
    return int(D(value).to_integral_value(rounding=ROUND_CEILING))
