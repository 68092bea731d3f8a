from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from functools import reduce
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from hovenier.config import CalculationConfig
from hovenier.domain.enums import SCOPE_ORDER, RegelType, Scope

from .context import PolicyNote, ScopeResult, collect_notes
from .rounding import money, round2, round_to_quarter

D = Decimal
ZERO = D("0")
HUNDRED = D("100")

logger = logging.getLogger(__name__)

UUR = "uur"
OVERHEAD_SCOPE = "algemeen"
GARANTIE_SCOPE = "garantie"


@dataclass(frozen=True)
class OfferteRegel:
    """
    Eén offerteregel. totaal is al op centen afgerond (dit is het punt waar
    het bedrag zichtbaar wordt); marge_percentage None = scope/globale marge.
    """

    id: str
    scope: str
    omschrijving: str
    eenheid: str
    hoeveelheid: D
    prijs_per_eenheid: D
    totaal: D
    type: RegelType
    marge_percentage: Optional[D] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "scope": self.scope,
            "omschrijving": self.omschrijving,
            "eenheid": self.eenheid,
            "hoeveelheid": self.hoeveelheid,
            "prijs_per_eenheid": self.prijs_per_eenheid,
            "totaal": self.totaal,
            "type": self.type.value,
            "marge_percentage": self.marge_percentage,
        }


@dataclass(frozen=True)
class OfferteTotalen:
    materiaalkosten: D
    arbeidskosten: D
    machinekosten: D
    totaal_uren: D
    subtotaal: D
    marge: D
    marge_percentage: D
    totaal_ex_btw: D
    btw: D
    totaal_incl_btw: D

    def to_dict(self) -> Dict[str, D]:
        return {
            "materiaalkosten": self.materiaalkosten,
            "arbeidskosten": self.arbeidskosten,
            "machinekosten": self.machinekosten,
            "totaal_uren": self.totaal_uren,
            "subtotaal": self.subtotaal,
            "marge": self.marge,
            "marge_percentage": self.marge_percentage,
            "totaal_ex_btw": self.totaal_ex_btw,
            "btw": self.btw,
            "totaal_incl_btw": self.totaal_incl_btw,
        }


@dataclass(frozen=True)
class OfferteBerekening:
    regels: Tuple[OfferteRegel, ...]
    totalen: OfferteTotalen
    uren_per_scope: Dict[str, D]
    notes: Tuple[PolicyNote, ...] = ()
    results: Tuple[ScopeResult, ...] = field(default=(), repr=False)


# -----------------------------
# Regels opbouwen
# -----------------------------


def _scope_sort_key(result: ScopeResult) -> int:
    return SCOPE_ORDER.get(result.scope.value, len(SCOPE_ORDER))


def regels_for_scope(result: ScopeResult, config: CalculationConfig) -> List[OfferteRegel]:
    """
    Scope-resultaat -> offerteregels.
    Arbeid: kwartier-afgeronde uren x uurtarief. Materiaal: hoeveelheid incl. verlies x verkoopprijs.
    """
    scope = result.scope.value
    out: List[OfferteRegel] = []

    def next_id() -> str:
        return f"regel_{scope}_{len(out) + 1:03d}"

    for item in result.labor:
        uren = round_to_quarter(item.uren)
        if uren <= 0:
            continue
        out.append(
            OfferteRegel(
                id=next_id(),
                scope=scope,
                omschrijving=item.omschrijving,
                eenheid=UUR,
                hoeveelheid=uren,
                prijs_per_eenheid=config.uurtarief,
                totaal=money(uren * config.uurtarief),
                type=RegelType.ARBEID,
                marge_percentage=item.marge_percentage,
            )
        )

    for svc in result.services:
        out.append(
            OfferteRegel(
                id=next_id(),
                scope=scope,
                omschrijving=svc.omschrijving,
                eenheid=svc.eenheid,
                hoeveelheid=round2(svc.hoeveelheid),
                prijs_per_eenheid=svc.prijs_per_eenheid,
                totaal=money(svc.hoeveelheid * svc.prijs_per_eenheid),
                type=RegelType.ARBEID,
                marge_percentage=svc.marge_percentage,
            )
        )

    for mat in result.materials:
        # bedrag over de ongeronde hoeveelheid, weergave op 2 decimalen
        met_verlies = mat.hoeveelheid_met_verlies
        out.append(
            OfferteRegel(
                id=next_id(),
                scope=scope,
                omschrijving=mat.omschrijving,
                eenheid=mat.eenheid,
                hoeveelheid=round2(met_verlies),
                prijs_per_eenheid=mat.prijs_per_eenheid,
                totaal=money(met_verlies * mat.prijs_per_eenheid),
                type=RegelType.MATERIAAL,
                marge_percentage=mat.marge_percentage,
            )
        )

    for eq in result.equipment:
        out.append(
            OfferteRegel(
                id=next_id(),
                scope=scope,
                omschrijving=eq.omschrijving,
                eenheid=eq.eenheid,
                hoeveelheid=round2(eq.hoeveelheid),
                prijs_per_eenheid=eq.prijs_per_eenheid,
                totaal=money(eq.hoeveelheid * eq.prijs_per_eenheid),
                type=RegelType.MACHINE,
            )
        )

    return out


def overhead_regel(bedrag: D) -> OfferteRegel:
    return OfferteRegel(
        id=f"regel_{OVERHEAD_SCOPE}_001",
        scope=OVERHEAD_SCOPE,
        omschrijving="Offerte voorbereiding & administratie",
        eenheid="vast",
        hoeveelheid=D("1"),
        prijs_per_eenheid=money(bedrag),
        totaal=money(bedrag),
        type=RegelType.ARBEID,
    )


def garantie_regel(naam: str, prijs: D) -> OfferteRegel:
    return OfferteRegel(
        id=f"regel_{GARANTIE_SCOPE}_001",
        scope=GARANTIE_SCOPE,
        omschrijving=f"Garantiepakket: {naam}",
        eenheid="pakket",
        hoeveelheid=D("1"),
        prijs_per_eenheid=money(prijs),
        totaal=money(prijs),
        type=RegelType.MATERIAAL,
    )


# -----------------------------
# Totalen (fold)
# -----------------------------


@dataclass(frozen=True)
class _Sums:
    """
    Tussenstand van de fold. combine() is associatief en commutatief
    (exacte Decimal-optelling), dus de volgorde van de regels doet er niet toe.
    """

    materiaal: D = ZERO
    arbeid: D = ZERO
    machine: D = ZERO
    uren: D = ZERO
    marge: D = ZERO

    def combine(self, other: "_Sums") -> "_Sums":
        return _Sums(
            materiaal=self.materiaal + other.materiaal,
            arbeid=self.arbeid + other.arbeid,
            machine=self.machine + other.machine,
            uren=self.uren + other.uren,
            marge=self.marge + other.marge,
        )


def effective_marge(
    regel: OfferteRegel,
    global_marge: D,
    scope_marges: Optional[Mapping[str, D]] = None,
) -> D:
    """Regel-override > scope-override > globale marge."""
    if regel.marge_percentage is not None:
        return regel.marge_percentage
    if scope_marges and regel.scope in scope_marges:
        return D(scope_marges[regel.scope])
    return global_marge


def _regel_sums(regel: OfferteRegel, global_marge: D, scope_marges: Optional[Mapping[str, D]]) -> _Sums:
    marge = regel.totaal * effective_marge(regel, global_marge, scope_marges) / HUNDRED
    if regel.type == RegelType.MATERIAAL:
        return _Sums(materiaal=regel.totaal, marge=marge)
    if regel.type == RegelType.MACHINE:
        return _Sums(machine=regel.totaal, marge=marge)
    uren = regel.hoeveelheid if regel.eenheid == UUR else ZERO
    return _Sums(arbeid=regel.totaal, uren=uren, marge=marge)


def calculate_totalen(
    regels: Sequence[OfferteRegel],
    config: CalculationConfig,
    scope_marges: Optional[Mapping[str, D]] = None,
) -> OfferteTotalen:
    sums = reduce(
        _Sums.combine,
        (_regel_sums(r, config.marge_percentage, scope_marges) for r in regels),
        _Sums(),
    )

    subtotaal = sums.materiaal + sums.arbeid + sums.machine
    totaal_ex_btw = subtotaal + sums.marge
    btw = totaal_ex_btw * config.btw_percentage / HUNDRED
    marge_pct = sums.marge / subtotaal * HUNDRED if subtotaal > 0 else config.marge_percentage

    # pas hier afronden (weergave/opslag)
    return OfferteTotalen(
        materiaalkosten=money(sums.materiaal),
        arbeidskosten=money(sums.arbeid),
        machinekosten=money(sums.machine),
        totaal_uren=round2(sums.uren),
        subtotaal=money(subtotaal),
        marge=money(sums.marge),
        marge_percentage=round2(marge_pct),
        totaal_ex_btw=money(totaal_ex_btw),
        btw=money(btw),
        totaal_incl_btw=money(totaal_ex_btw + btw),
    )


def uren_per_scope(regels: Iterable[OfferteRegel]) -> Dict[str, D]:
    acc: Dict[str, D] = {}
    for r in regels:
        if r.type != RegelType.ARBEID or r.eenheid != UUR:
            continue
        acc[r.scope] = acc.get(r.scope, ZERO) + r.hoeveelheid
    return {k: acc[k] for k in sorted(acc)}


class QuoteAggregator:
    """
    Scope-resultaten -> offerteregels + totalen.

    Volgorde van de regels volgt de vaste scope-volgorde, niet de invoervolgorde;
    twee keer aggregeren op dezelfde invoer geeft identieke uitkomsten.
    """

    def __init__(self, config: Optional[CalculationConfig] = None):
        self.config = config or CalculationConfig()

    def build_regels(self, results: Iterable[ScopeResult]) -> List[OfferteRegel]:
        ordered = sorted(results, key=_scope_sort_key)
        regels: List[OfferteRegel] = []
        per_scope_count: Dict[Scope, int] = {}
        for result in ordered:
            scope_regels = regels_for_scope(result, self.config)
            # meerdere resultaten voor dezelfde scope: ids doornummeren
            offset = per_scope_count.get(result.scope, 0)
            if offset:
                scope_regels = [
                    replace(r, id=f"regel_{result.scope.value}_{offset + i + 1:03d}") for i, r in enumerate(scope_regels)
                ]
            per_scope_count[result.scope] = offset + len(scope_regels)
            regels.extend(scope_regels)
        return regels

    def aggregate(
        self,
        results: Sequence[ScopeResult],
        scope_marges: Optional[Mapping[str, D]] = None,
        extra_regels: Sequence[OfferteRegel] = (),
    ) -> OfferteBerekening:
        regels = self.build_regels(results) + list(extra_regels)
        totalen = calculate_totalen(regels, self.config, scope_marges)
        logger.debug(
            "quote aggregated: %d regels, subtotaal=%s, totaal_incl_btw=%s",
            len(regels),
            totalen.subtotaal,
            totalen.totaal_incl_btw,
        )
        return OfferteBerekening(
            regels=tuple(regels),
            totalen=totalen,
            uren_per_scope=uren_per_scope(regels),
            notes=tuple(collect_notes(list(results))),
            results=tuple(results),
        )

