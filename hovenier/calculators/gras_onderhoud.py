from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import Scope
from hovenier.domain.scopes import GrasOnderhoudInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal


def kanten_lengte(oppervlakte: D) -> D:
    # omtrek van een vierkant gazon met dezelfde oppervlakte
    return D("4") * D(oppervlakte).sqrt()


@register(Scope.GRAS_ONDERHOUD)
def calc_gras_onderhoud(inp: GrasOnderhoudInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.GRAS_ONDERHOUD, ctx)
    opp = inp.oppervlakte
    sel = ctx.onderhoud_selection()

    if inp.maaien:
        b.labor("maaien", opp, "Gazon maaien", sel)
    if inp.kanten_steken:
        b.labor("kanten steken", kanten_lengte(opp), "Graskanten steken", sel)
    if inp.verticuteren:
        # geen achterstalligheid: verticuteren is een vaste bewerking
        b.labor("verticuteren", opp, "Gazon verticuteren", ctx.basic_selection())

    return b.build()
