from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import Scope
from hovenier.domain.scopes import SpecialsInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal


@register(Scope.SPECIALS)
def calc_specials(inp: SpecialsInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.SPECIALS, ctx)
    sel = ctx.aanleg_selection()
    for item in inp.items:
        omschrijving = item.omschrijving or f"{item.type.value.capitalize()} plaatsen"
        b.labor(f"installatie {item.type.value}", D("1"), omschrijving, sel)
    return b.build()
