from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import Scope
from hovenier.domain.scopes import OverigInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal


@register(Scope.OVERIG)
def calc_overig(inp: OverigInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.OVERIG, ctx)
    sel = ctx.onderhoud_selection()

    if inp.bladruimen:
        b.labor("bladruimen", D("1"), "Bladruimen", sel)
    if inp.terras_oppervlakte is not None:
        b.labor("terras reinigen", inp.terras_oppervlakte, "Terras reinigen", sel)
    if inp.onkruid_bestrating_oppervlakte is not None:
        b.labor("onkruid bestrating", inp.onkruid_bestrating_oppervlakte, "Onkruid tussen bestrating", sel)
    if inp.afwateringspunten is not None:
        b.labor("afwatering controleren", D(inp.afwateringspunten), "Afwatering controleren", ctx.basic_selection())
    if inp.overig_uren is not None:
        b.labor_hours(inp.overig_uren, inp.notities or "Overige werkzaamheden", ctx.basic_selection())

    return b.build()
