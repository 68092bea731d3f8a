from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import MollenPakket, Scope
from hovenier.domain.scopes import MollenbestrijdingInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal

PAKKET_OMSCHRIJVING = {
    MollenPakket.BASIS: "Mollenbestrijding basis (1 bezoek)",
    MollenPakket.PREMIUM: "Mollenbestrijding premium (3 bezoeken)",
    MollenPakket.PREMIUM_PLUS: "Mollenbestrijding premium plus (6 bezoeken)",
}


@register(Scope.MOLLENBESTRIJDING)
def calc_mollenbestrijding(inp: MollenbestrijdingInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.MOLLENBESTRIJDING, ctx)
    pakket = inp.pakket.value
    sel = ctx.basic_selection()

    b.labor(f"klemmen {pakket}", D("1"), PAKKET_OMSCHRIJVING[inp.pakket], sel)
    b.labor(f"controle {pakket}", D("1"), f"Controlebezoeken ({pakket})", sel)
    b.material(f"mollenklemmen set {pakket}", f"Mollenklemmen set {pakket}", D("1"))

    if inp.gazonherstel_m2 is not None:
        b.labor("gazonherstel", inp.gazonherstel_m2, "Gazonherstel molshopen", sel)
        b.material("mollenherstel", "Graszaad mollenherstel", inp.gazonherstel_m2)

    if inp.preventief_gaas_m2 is not None:
        b.labor("preventief gaas", inp.preventief_gaas_m2, "Mollenwerend gaas aanbrengen", sel)
        b.material("mollenwerend gaas", "Mollenwerend gaas", inp.preventief_gaas_m2)

    if inp.terugkeer_check:
        b.labor("terugkeer check", D("1"), "Terugkeercontrole na 3 maanden", sel)

    return b.build()
