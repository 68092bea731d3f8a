from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import BladruimenType, FactorCategorie, OnkruidMethode, Scope
from hovenier.domain.scopes import ReinigingInput
from hovenier.engine.context import CalcContext, ScopeResult
from hovenier.engine.correction import ResolvedFactor

from .base import ScopeResultBuilder, register

D = Decimal

SEIZOEN_BEURTEN = 4

ONKRUID_MACHINE = {
    OnkruidMethode.BRANDEN: ("onkruidbrander", "Onkruidbrander huur"),
    OnkruidMethode.HEET_WATER: ("heetwater", "Heetwater-apparaat huur"),
}


@register(Scope.REINIGING)
def calc_reiniging(inp: ReinigingInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.REINIGING, ctx)
    sel = ctx.onderhoud_selection()

    terras = inp.terras
    if terras is not None:
        terras_sel = sel.with_extra((FactorCategorie.TERRASTYPE.value, terras.type.value if terras.type else None))
        b.labor("terras reinigen", terras.oppervlakte, "Terras reinigen", terras_sel)
        b.material("reinigingsmiddel", "Reinigingsmiddel terras", terras.oppervlakte)

    blad = inp.bladruimen
    if blad is not None:
        beurten = []
        if blad.type == BladruimenType.SEIZOEN:
            beurten.append(ResolvedFactor("beurten", "seizoen", D(SEIZOEN_BEURTEN)))
        b.labor("bladruimen", blad.oppervlakte, f"Bladruimen ({blad.type.value})", sel, toeslagen=beurten)
        b.labor("blad afvoeren", blad.oppervlakte, "Blad afvoeren", ctx.basic_selection(), toeslagen=beurten)

    onkruid = inp.onkruid
    if onkruid is not None:
        methode = onkruid.methode
        b.labor(f"onkruid {methode.value}", onkruid.oppervlakte, f"Onkruid bestrating ({methode.value})", sel)
        if methode in ONKRUID_MACHINE:
            term, label = ONKRUID_MACHINE[methode]
            b.equipment(term, label, D("1"))
        elif methode == OnkruidMethode.CHEMISCH:
            b.material("onkruidbestrijdingsmiddel", "Onkruidbestrijdingsmiddel", onkruid.oppervlakte)

    algen = inp.algen
    if algen is not None:
        b.labor("algereiniging", algen.oppervlakte, "Algen en mos verwijderen", sel)
        b.material("anti-alg", "Anti-alg middel", algen.oppervlakte)

    return b.build()
