from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from hovenier.domain.enums import FactorCategorie, Scope
from hovenier.domain.scopes import HeggenInput
from hovenier.engine.context import CalcContext, ScopeResult
from hovenier.engine.correction import ResolvedFactor
from hovenier.engine.rounding import ceil_int

from .base import ScopeResultBuilder, frequency_factor, register

D = Decimal

logger = logging.getLogger(__name__)

SNOEISEL_PER_M3 = D("0.3")
HOOGWERKER_VANAF_M = D("4")
HOOGWERKER_METERS_PER_DAG = D("10")


def heg_volume(inp: HeggenInput) -> D:
    return inp.lengte * inp.hoogte * inp.breedte


@register(Scope.HEGGEN)
def calc_heggen(inp: HeggenInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.HEGGEN, ctx)
    cfg = ctx.config
    volume = heg_volume(inp)

    sel = ctx.onderhoud_selection().with_extra(
        (FactorCategorie.HAAGSOORT.value, inp.haagsoort.value if inp.haagsoort else None),
        (FactorCategorie.ONDERGROND.value, inp.ondergrond.value if inp.ondergrond else None),
    )

    toeslagen: List[ResolvedFactor] = []
    if inp.hoogte > cfg.hoogte_drempel_m:
        toeslagen.append(ResolvedFactor("hoogtetoeslag", f"> {cfg.hoogte_drempel_m} m", cfg.hoogte_toeslag_factor))
        b.note(
            "HEG_HOOGTE_TOESLAG",
            f"Heg hoger dan {cfg.hoogte_drempel_m} m: snoeiuren x{cfg.hoogte_toeslag_factor}",
        )
    toeslagen.extend(frequency_factor(inp.frequentie))

    b.labor(
        f"heg snoeien {inp.snoei.value}",
        volume,
        f"Heg snoeien ({inp.snoei.value})",
        sel,
        toeslagen=toeslagen,
    )

    if inp.afvoer_snoeisel:
        snoeisel = volume * SNOEISEL_PER_M3
        b.labor(
            "snoeisel afvoeren",
            snoeisel,
            "Snoeisel afvoeren",
            ctx.basic_selection(),
            toeslagen=frequency_factor(inp.frequentie),
        )

    if inp.hoogwerker_nodig or inp.hoogte > HOOGWERKER_VANAF_M:
        dagen = ceil_int(inp.lengte / HOOGWERKER_METERS_PER_DAG) * inp.frequentie
        b.equipment("hoogwerker", "Hoogwerker huur", D(dagen))
        if not inp.hoogwerker_nodig:
            logger.info("hedge height %s m > %s m, hoogwerker added", inp.hoogte, HOOGWERKER_VANAF_M)
            b.note("HEG_HOOGWERKER", f"Heg hoger dan {HOOGWERKER_VANAF_M} m: hoogwerker toegevoegd")

    return b.build()
