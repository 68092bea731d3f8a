from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import Scope
from hovenier.domain.scopes import GazonanalyseInput
from hovenier.engine.context import CalcContext, ScopeResult
from hovenier.engine.rounding import ceil_int

from .base import ScopeResultBuilder, register

D = Decimal

KALE_PLEKKEN_SCHATTING = D("0.1")
VERTICUTEER_M2_PER_DAG = D("500")


@register(Scope.GAZONANALYSE)
def calc_gazonanalyse(inp: GazonanalyseInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.GAZONANALYSE, ctx)
    opp = inp.oppervlakte
    sel = ctx.basic_selection()

    # beoordeling is een vaste post, los van bereikbaarheid
    b.labor("gazonbeoordeling", D("1"), "Gazonbeoordeling en advies", None)

    if inp.verticuteren:
        b.labor("verticuteren", opp, "Verticuteren", sel)
        b.equipment("verticuteermachine", "Verticuteermachine huur", D(max(1, ceil_int(opp / VERTICUTEER_M2_PER_DAG))))

    if inp.doorzaaien:
        b.labor("doorzaaien", opp, "Doorzaaien", sel)
        b.material("doorzaai", "Graszaad doorzaai", opp)

    if inp.nieuwe_grasmat:
        b.labor("nieuwe grasmat", opp, "Nieuwe grasmat leggen", sel)
        b.material("gazonherstel", "Graszoden gazonherstel", opp)

    if inp.plaggen:
        b.labor("plaggen", opp, "Plaggen", sel)
        b.labor("plagsel afvoeren", opp, "Plagsel afvoeren", sel)

    if inp.kale_plekken is not None:
        plekken = inp.kale_plekken.oppervlakte or D(ceil_int(opp * KALE_PLEKKEN_SCHATTING))
        b.labor("bijzaaien", plekken, "Kale plekken bijzaaien", sel)
        b.material("kale plekken", "Graszaad kale plekken", plekken)

    if inp.bekalken:
        b.labor("bekalken", opp, "Bekalken", sel)
        b.material("kalk", "Kalk", opp)

    if inp.drainage:
        b.note("GAZON_DRAINAGE_PM", "Drainage apart offreren na inspectie ter plaatse")
        b.fixed_service("Drainage (p.m., prijs na inspectie)", D("1"), "post", D("0"))

    return b.build()
