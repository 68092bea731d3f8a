from __future__ import annotations

from decimal import Decimal
from typing import List

from hovenier.domain.enums import FactorCategorie, Scope
from hovenier.domain.scopes import BemestingInput
from hovenier.engine.context import CalcContext, ScopeResult
from hovenier.engine.correction import ResolvedFactor

from .base import ScopeResultBuilder, frequency_factor, register

D = Decimal

# bemesting heeft een eigen (hogere) marge
BEMESTING_MARGE = D("70")


@register(Scope.BEMESTING)
def calc_bemesting(inp: BemestingInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.BEMESTING, ctx)
    opp = inp.oppervlakte
    freq = inp.frequentie
    sel = ctx.basic_selection()

    toeslagen: List[ResolvedFactor] = list(frequency_factor(freq))
    if freq >= 2:
        categorie = FactorCategorie.FREQUENTIEKORTING.value
        toeslagen.append(ResolvedFactor(categorie, "meervoudig", ctx.reference.factor(categorie, "meervoudig")))

    b.labor(
        "bemesting aanbrengen",
        opp,
        f"Bemesting aanbrengen ({inp.type.value}, {freq}x per jaar)",
        sel,
        toeslagen=toeslagen,
        marge_percentage=BEMESTING_MARGE,
    )
    b.material(
        f"bemesting {inp.type.value}",
        f"Bemesting {inp.type.value}",
        opp * freq,
        marge_percentage=BEMESTING_MARGE,
    )

    if inp.kalkbehandeling:
        b.labor("kalkbehandeling", opp, "Kalkbehandeling", sel, marge_percentage=BEMESTING_MARGE)
        b.material("kalk", "Kalk", opp, marge_percentage=BEMESTING_MARGE)

    if inp.grondanalyse:
        b.material("grondanalyse", "Grondanalyse (lab)", D("1"), marge_percentage=BEMESTING_MARGE)

    return b.build()
