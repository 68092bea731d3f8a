from __future__ import annotations

from decimal import Decimal
from typing import Dict, Tuple

from hovenier.domain.enums import FunderingProfiel, Scope
from hovenier.domain.scopes import BestratingInput
from hovenier.engine.context import CalcContext, ScopeResult

from .base import ScopeResultBuilder, register

D = Decimal

# Funderingsopbouw per belasting: (product zoekterm, label, dikte in cm)
FUNDERING_OPBOUW: Dict[FunderingProfiel, Tuple[Tuple[str, str, int], ...]] = {
    FunderingProfiel.PAD: (
        ("gebroken puin", "Gebroken puin", 10),
        ("straatzand", "Straatzand", 5),
    ),
    FunderingProfiel.OPRIT: (
        ("gebroken puin", "Gebroken puin", 20),
        ("brekerszand", "Brekerszand", 5),
    ),
    FunderingProfiel.TERREIN: (
        ("gebroken puin", "Gebroken puin", 35),
        ("brekerszand", "Brekerszand", 5),
        ("stabiliser", "Stabiliser (cement)", 5),
    ),
}

ONDERBOUW_PRODUCT = {"zandbed": "straatzand", "puinbed": "gebroken puin"}


def _fundering(b: ScopeResultBuilder, profiel: FunderingProfiel, oppervlakte: D, prefix: str = "") -> None:
    for term, label, cm in FUNDERING_OPBOUW[profiel]:
        m3 = oppervlakte * D(cm) / D("100")
        b.material(term, f"{prefix}{label} ({cm} cm)", m3)


@register(Scope.BESTRATING)
def calc_bestrating(inp: BestratingInput, ctx: CalcContext) -> ScopeResult:
    b = ScopeResultBuilder(Scope.BESTRATING, ctx)
    opp = inp.oppervlakte
    soort = inp.soort.value

    # leggen: normuur per soort x snijwerk
    b.labor(
        f"{soort} leggen",
        opp,
        f"{soort.capitalize()} leggen",
        ctx.aanleg_selection(snijwerk=inp.snijwerk.value),
    )

    onderbouw = inp.onderbouw
    if onderbouw is not None:
        sel = ctx.aanleg_selection()
        b.labor(onderbouw.laag, opp, f"{onderbouw.laag.capitalize()} aanbrengen", sel)
        m3 = opp * onderbouw.dikte_cm / D("100")
        b.material(ONDERBOUW_PRODUCT[onderbouw.laag], f"{onderbouw.laag.capitalize()} ({onderbouw.dikte_cm} cm)", m3)

        if onderbouw.opsluitbanden:
            # omtrek geschat als vierkant
            omtrek = D("4") * opp.sqrt()
            b.labor("opsluitbanden", omtrek, "Opsluitbanden plaatsen", sel)
            b.material("opsluitband", "Opsluitband 100x20x6", omtrek)

    if inp.fundering is not None:
        _fundering(b, inp.fundering, opp)

    for zone in inp.zones:
        _fundering(b, zone.profiel, zone.oppervlakte, prefix=f"Zone {zone.profiel.value}: ")

    return b.build()
