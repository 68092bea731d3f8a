from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import GrasType, Scope
from hovenier.domain.scopes import GrasInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal

GRASZAAD_KG_PER_M2 = D("0.035")


@register(Scope.GRAS)
def calc_gras(inp: GrasInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.GRAS, ctx)
    opp = inp.oppervlakte
    sel = ctx.aanleg_selection()

    b.labor("ondergrond bewerken", opp, "Ondergrond bewerken", sel)

    if inp.type == GrasType.GRASZODEN:
        b.labor("graszoden leggen", opp, "Graszoden leggen", sel)
        b.material("graszoden", "Graszoden", opp, categorie="gras")
    else:
        b.labor("zaaien", opp, "Gras zaaien", sel)
        b.material("graszaad", "Graszaad", opp * GRASZAAD_KG_PER_M2, categorie="gras")

    if inp.kunstgras:
        b.material("kunstgras", "Kunstgras", opp)
        b.labor("kunstgras leggen", opp, "Kunstgras leggen", sel)

    if inp.drainage_meters is not None:
        b.material("drainagebuis", "PVC drainagebuis", inp.drainage_meters)
        b.material("kokos", "Kokos omhulsel", inp.drainage_meters)

    if inp.opsluitbanden_meters is not None:
        b.material("opsluitband", "Opsluitbanden", inp.opsluitbanden_meters)

    return b.build()
