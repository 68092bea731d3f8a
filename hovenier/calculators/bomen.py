from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from hovenier.domain.enums import BoomHoogte, BoomInspectie, FactorCategorie, Scope
from hovenier.domain.scopes import BomenInput
from hovenier.engine.context import CalcContext, ScopeResult
from hovenier.engine.correction import ResolvedFactor

from .base import ScopeResultBuilder, register

D = Decimal

HOOG_VANAF_M = D("4")
ZEER_HOOG_VANAF_M = D("10")
STANDAARD_KROONDIAMETER_M = D("3")

RISICOS = ("straat", "gebouw", "kabels")


def hoogteklasse(inp: BomenInput) -> BoomHoogte:
    """Gemeten hoogte gaat voor: een boom van 12 m is 'zeer_hoog', ook als 'middel' is gekozen."""
    if inp.hoogteklasse == BoomHoogte.ZEER_HOOG or (inp.hoogte_m is not None and inp.hoogte_m > ZEER_HOOG_VANAF_M):
        return BoomHoogte.ZEER_HOOG
    if inp.hoogteklasse == BoomHoogte.HOOG or (inp.hoogte_m is not None and inp.hoogte_m > HOOG_VANAF_M):
        return BoomHoogte.HOOG
    return inp.hoogteklasse


def veiligheid_factor(inp: BomenInput, ctx: CalcContext) -> Optional[ResolvedFactor]:
    """Opslagen per risico uit de correctietabel, opgeteld: straat + kabels = 1 + 0.20 + 0.15."""
    nabij = {"straat": inp.nabij_straat, "gebouw": inp.nabij_gebouw, "kabels": inp.nabij_kabels}
    risico: List[str] = [r for r in RISICOS if nabij[r]]
    if not risico:
        return None
    categorie = FactorCategorie.VEILIGHEID.value
    opslag = sum((ctx.reference.factor(categorie, r) - D("1") for r in risico), D("0"))
    factor = D("1") + opslag
    return ResolvedFactor(categorie, "+".join(risico), factor)


@register(Scope.BOMEN)
def calc_bomen(inp: BomenInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.BOMEN, ctx)
    aantal = D(inp.aantal)
    klasse = hoogteklasse(inp)

    sel = ctx.onderhoud_selection().with_extra((FactorCategorie.BOOMHOOGTE.value, klasse.value))
    veiligheid = veiligheid_factor(inp, ctx)
    toeslagen = [veiligheid] if veiligheid else []

    b.labor(
        f"boom snoeien {inp.snoei.value}",
        aantal,
        f"Boom snoeien ({inp.snoei.value}, {klasse.value})",
        sel,
        toeslagen=toeslagen,
    )

    if inp.inspectie == BoomInspectie.VISUEEL:
        b.labor("inspectie visueel", aantal, "Visuele boominspectie", ctx.basic_selection())
    elif inp.inspectie == BoomInspectie.GECERTIFICEERD:
        b.service("boominspectie", "Gecertificeerde boominspectie (VTA)", aantal)

    if inp.afvoer:
        diameter = inp.kroondiameter_m or STANDAARD_KROONDIAMETER_M
        kroon = diameter * diameter * aantal
        b.labor("snoeihout afvoeren", kroon, "Snoeihout afvoeren", ctx.basic_selection())

    return b.build()
