from __future__ import annotations

from hovenier.domain.enums import BorderSnoei, Scope
from hovenier.domain.scopes import BordersOnderhoudInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register


@register(Scope.BORDERS_ONDERHOUD)
def calc_borders_onderhoud(inp: BordersOnderhoudInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.BORDERS_ONDERHOUD, ctx)
    opp = inp.oppervlakte
    sel = ctx.onderhoud_selection()

    if inp.onkruid_verwijderen:
        # normuur per intensiteit staat als eigen rij in de tabel
        niveau = inp.intensiteit.value
        b.labor(f"wieden {niveau}", opp, f"Onkruid wieden ({niveau})", sel)

    if inp.snoei != BorderSnoei.GEEN:
        b.labor(f"snoei {inp.snoei.value}", opp, f"Snoeien border ({inp.snoei.value})", sel)

    return b.build()
