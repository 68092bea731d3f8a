from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import HoutwerkType, Scope
from hovenier.domain.scopes import HoutwerkInput
from hovenier.engine.context import CalcContext, ScopeResult
from hovenier.engine.rounding import ceil_int

from .base import ScopeResultBuilder, register

D = Decimal

SCHUTTINGPLANKEN_PER_METER = D("6")
PAAL_AFSTAND_M = D("2")
VLONDERPLANKEN_M_PER_M2 = D("7")
VLONDER_EXTRA_FUNDERING = 4
FUNDERING_PER_PERGOLA = 4


def fundering_punten(inp: HoutwerkInput) -> int:
    if inp.type == HoutwerkType.SCHUTTING:
        return ceil_int(inp.afmeting / PAAL_AFSTAND_M) + 1
    if inp.type == HoutwerkType.VLONDER:
        return ceil_int(inp.afmeting / PAAL_AFSTAND_M) + VLONDER_EXTRA_FUNDERING
    return ceil_int(inp.afmeting) * FUNDERING_PER_PERGOLA


@register(Scope.HOUTWERK)
def calc_houtwerk(inp: HoutwerkInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.HOUTWERK, ctx)
    a = inp.afmeting
    sel = ctx.aanleg_selection()

    if inp.type == HoutwerkType.SCHUTTING:
        b.labor("schutting", a, "Schutting plaatsen", sel)
        b.material("schuttingplank", "Schuttingplank 180x15cm", a * SCHUTTINGPLANKEN_PER_METER)
        b.material("schuttingpaal", "Schuttingpaal 7x7x270cm", D(ceil_int(a / PAAL_AFSTAND_M) + 1))
    elif inp.type == HoutwerkType.VLONDER:
        b.labor("vlonder", a, "Vlonder leggen", sel)
        b.material("vlonderdeel", "Vlonderdeel hardhout 21x145mm", a * VLONDERPLANKEN_M_PER_M2)
    else:
        b.labor("pergola", a, "Pergola bouwen", sel)

    punten = D(fundering_punten(inp))
    fundering = inp.fundering.value
    b.labor(f"fundering {fundering}", punten, f"Fundering plaatsen ({fundering})", sel)
    b.material("betonpoer", "Betonpoer 30x30x30cm", punten)

    return b.build()
