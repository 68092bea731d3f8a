from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import BorderAfwerking, Intensiteit, Scope
from hovenier.domain.scopes import BordersInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal

PLANTEN_PER_M2 = {
    Intensiteit.WEINIG: D("3"),
    Intensiteit.GEMIDDELD: D("6"),
    Intensiteit.VEEL: D("10"),
}
AFWERKING_M3_PER_M2 = D("0.05")
BODEMVERBETERING_DIEPTE_M = D("0.3")

AFWERKING_PRODUCT = {
    BorderAfwerking.SCHORS: ("boomschors", "Boomschors 10-40mm"),
    BorderAfwerking.GRIND: ("siergrind", "Siergrind 8-16mm"),
}


@register(Scope.BORDERS)
def calc_borders(inp: BordersInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.BORDERS, ctx)
    opp = inp.oppervlakte
    sel = ctx.aanleg_selection()
    intensiteit = inp.intensiteit

    b.labor("grondbewerking", opp, "Grondbewerking border", sel)
    b.labor(
        "planten",
        opp,
        f"Beplanten ({intensiteit.value} intensiteit)",
        ctx.aanleg_selection(intensiteit=intensiteit.value),
    )
    b.material("bodembedekker", "Bodembedekker (pot 9cm)", opp * PLANTEN_PER_M2[intensiteit])

    if inp.afwerking in AFWERKING_PRODUCT:
        term, label = AFWERKING_PRODUCT[inp.afwerking]
        b.labor("schors aanbrengen", opp, f"{inp.afwerking.value.capitalize()} aanbrengen", sel)
        b.material(term, label, opp * AFWERKING_M3_PER_M2)

    if inp.bodemverbetering:
        b.material("bodemverbetering", "Bodemverbetering (nieuwe grondmix)", opp * BODEMVERBETERING_DIEPTE_M)

    return b.build()
