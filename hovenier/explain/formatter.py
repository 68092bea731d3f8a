from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal
from typing import Iterable, List

D = Decimal


def _clean_step(s: str) -> str:
    # steps zijn al newline/tab-vrij via de Breakdown, maar extra safety
    return str(s).replace("\r", "").replace("\n", " ").replace("\t", " ").strip()


def format_number(value: D) -> str:
    """Getal zonder overbodige nullen: 15.0 -> '15', 8.30 -> '8.3'."""
    d = D(value)
    if d == d.to_integral_value():
        return str(int(d))
    return format(d.normalize(), "f")


def format_steps_newlines(steps: Iterable[str]) -> str:
    """
    Excel export: 1 cel met newline joins.
    """
    return "\n".join(_clean_step(s) for s in steps if str(s).strip())


def format_steps_bullets(steps: Iterable[str], bullet: str = "•") -> List[str]:
    return [f"{bullet} {_clean_step(s)}" for s in steps if str(s).strip()]


def format_hours_as_days(hours: D, hours_per_day: D = D("8")) -> str:
    """'10 uur' bij 8 uur per dag -> '1 dag, 2 uur'."""
    h = D(hours)
    per_dag = D(hours_per_day)
    dagen = int((h / per_dag).to_integral_value(rounding=ROUND_FLOOR))
    rest = (h - dagen * per_dag).quantize(D("0.1"), rounding=ROUND_HALF_UP)

    if dagen == 0:
        return f"{format_number(rest)} uur"
    label = "dag" if dagen == 1 else "dagen"
    if rest == 0:
        return f"{dagen} {label}"
    return f"{dagen} {label}, {format_number(rest)} uur"


def format_deviation(percentage: D) -> str:
    sign = "+" if percentage > 0 else ""
    return f"{sign}{format_number(percentage)}%"


def scope_display_name(scope: str) -> str:
    # "water_elektra" -> "Water/Elektra"
    return "/".join(part[:1].upper() + part[1:] for part in scope.split("_"))


def format_euro(value: D) -> str:
    """Nederlandse notatie: 1234.5 -> '€ 1.234,50'."""
    q = D(value).quantize(D("0.01"), rounding=ROUND_HALF_UP)
    s = f"{abs(q):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"-€ {s}" if q < 0 else f"€ {s}"
