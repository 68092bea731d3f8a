from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import Scope
from hovenier.domain.scopes import WaterElektraInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal

SLEUF_M_PER_LICHTPUNT = D("5")


@register(Scope.WATER_ELEKTRA)
def calc_water_elektra(inp: WaterElektraInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.WATER_ELEKTRA, ctx)
    punten = D(inp.aantal_punten)
    sel = ctx.aanleg_selection()

    if inp.sleuven_nodig:
        sleuf = punten * SLEUF_M_PER_LICHTPUNT
        b.labor("sleuf graven", sleuf, "Sleuf graven", sel)
        b.labor("kabel leggen", sleuf, "Kabel leggen", sel)
        b.labor("sleuf herstellen", sleuf, "Sleuf herstellen", sel)
        b.material("kabel", "Kabel 3x1,5 grond", sleuf)

    b.labor("armatuur plaatsen", punten, "Armaturen plaatsen", sel)
    b.material("grondspot", "Grondspot LED", punten)
    b.material("lasdoos", "Lasdoos waterdicht", punten)

    return b.build()
