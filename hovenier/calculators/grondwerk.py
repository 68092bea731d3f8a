from __future__ import annotations

from decimal import Decimal

from hovenier.domain.enums import Diepte, Scope
from hovenier.domain.scopes import GrondwerkInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal

# ontgravingsdiepte per klasse (m), voor het afvoervolume
DIEPTE_METERS = {
    Diepte.LICHT: D("0.2"),
    Diepte.STANDAARD: D("0.4"),
    Diepte.ZWAAR: D("0.6"),
}


@register(Scope.GRONDWERK)
def calc_grondwerk(inp: GrondwerkInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.GRONDWERK, ctx)
    sel = ctx.aanleg_selection()
    diepte = inp.diepte.value

    # categorische multiplier zit in de normuur-rij per diepteklasse
    b.labor(f"ontgraven {diepte}", inp.oppervlakte, f"Ontgraven {diepte}", sel)

    if inp.afvoer_grond:
        m3 = inp.oppervlakte * DIEPTE_METERS[inp.diepte]
        b.labor("grond afvoeren", m3, "Grond afvoeren", sel)
        b.material("afvoer grond", "Afvoer grond (stort)", m3, verliespercentage=D("0"))

    return b.build()
