"""
Leerfeedback: normuur-suggesties uit meerdere nacalculaties.

Alleen suggesties; er wordt nooit automatisch een normuur aangepast.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Mapping, Optional, Sequence

from hovenier.domain.enums import Betrouwbaarheid
from hovenier.engine.rounding import pct1, round2, round3
from hovenier.explain.formatter import format_number
from hovenier.reference.models import Normuur

D = Decimal
ZERO = D("0")
HUNDRED = D("100")

logger = logging.getLogger(__name__)

MIN_PROJECTEN = 3
AFWIJKING_DREMPEL = D("10")
GROTE_AANPASSING = D("50")
GROTE_WIJZIGING = D("100")
HOGE_PRIORITEIT_DREMPEL = D("20")

ONDERSCHATTING = "onderschatting"
OVERSCHATTING = "overschatting"


@dataclass(frozen=True)
class NacalculatieDataPoint:
    project_id: str
    project_naam: str
    afwijkingen_per_scope: Mapping[str, D]
    geplande_uren_per_scope: Mapping[str, D]


@dataclass(frozen=True)
class ActiviteitSuggestie:
    activiteit: str
    huidige_waarde: D
    gesuggereerde_waarde: D
    wijziging_percentage: D
    eenheid: str


@dataclass(frozen=True)
class ScopeSuggestie:
    id: str
    scope: str
    activiteiten: List[ActiviteitSuggestie]
    gemiddelde_afwijking: D
    gemiddelde_afwijking_percentage: D
    aantal_projecten: int
    betrouwbaarheid: Betrouwbaarheid
    bron_projecten: List[str]
    reden: str
    type: str


@dataclass(frozen=True)
class LeerfeedbackAnalyse:
    suggesties: List[ScopeSuggestie] = field(default_factory=list)
    totaal_geanalyseerde_projecten: int = 0
    scopes_met_voldoende_data: int = 0
    scopes_zonder_suggestie: List[str] = field(default_factory=list)


@dataclass
class _ScopeStats:
    totaal_afwijking: D = ZERO
    totaal_gepland: D = ZERO
    count: int = 0
    project_ids: List[str] = field(default_factory=list)


def confidence_level(aantal: int) -> Betrouwbaarheid:
    if aantal >= 10:
        return Betrouwbaarheid.HOOG
    if aantal >= 5:
        return Betrouwbaarheid.GEMIDDELD
    return Betrouwbaarheid.LAAG


def _activiteit_suggestie(normuur: Normuur, factor: D) -> ActiviteitSuggestie:
    huidig = normuur.normuur_per_eenheid
    nieuw = round3(huidig * factor)
    return ActiviteitSuggestie(
        activiteit=normuur.activiteit,
        huidige_waarde=huidig,
        gesuggereerde_waarde=nieuw,
        wijziging_percentage=pct1((nieuw - huidig) / huidig * HUNDRED),
        eenheid=normuur.eenheid,
    )


def analyze_nacalculaties(
    nacalculaties: Sequence[NacalculatieDataPoint],
    normuren: Sequence[Normuur],
) -> LeerfeedbackAnalyse:
    if not nacalculaties:
        return LeerfeedbackAnalyse()

    stats: Dict[str, _ScopeStats] = {}
    for data in nacalculaties:
        for scope, afwijking in data.afwijkingen_per_scope.items():
            s = stats.setdefault(scope, _ScopeStats())
            s.totaal_afwijking += D(afwijking)
            s.totaal_gepland += D(data.geplande_uren_per_scope.get(scope, ZERO))
            s.count += 1
            s.project_ids.append(data.project_id)

    suggesties: List[ScopeSuggestie] = []
    zonder: List[str] = []
    voldoende = 0

    for scope in sorted(stats):
        s = stats[scope]
        if s.count < MIN_PROJECTEN:
            zonder.append(scope)
            continue
        voldoende += 1

        gem_afwijking = s.totaal_afwijking / s.count
        gem_pct = s.totaal_afwijking / s.totaal_gepland * HUNDRED if s.totaal_gepland > 0 else ZERO
        if abs(gem_pct) < AFWIJKING_DREMPEL:
            zonder.append(scope)
            continue

        scope_normuren = [n for n in normuren if n.scope == scope]
        if not scope_normuren:
            logger.info("leerfeedback: no normuren for scope %s, no suggestion", scope)
            zonder.append(scope)
            continue

        factor = D("1") + gem_pct / HUNDRED
        soort = ONDERSCHATTING if gem_pct > 0 else OVERSCHATTING
        afgerond = abs(gem_pct).quantize(D("1"), rounding=ROUND_HALF_UP)

        suggesties.append(
            ScopeSuggestie(
                id=f"suggestie_{scope}",
                scope=scope,
                activiteiten=[_activiteit_suggestie(n, factor) for n in scope_normuren],
                gemiddelde_afwijking=round2(gem_afwijking),
                gemiddelde_afwijking_percentage=pct1(gem_pct),
                aantal_projecten=s.count,
                betrouwbaarheid=confidence_level(s.count),
                bron_projecten=list(s.project_ids),
                reden=f"Gemiddelde {soort} van {afgerond}% over {s.count} projecten",
                type=soort,
            )
        )

    suggesties.sort(key=lambda x: (-abs(x.gemiddelde_afwijking_percentage), x.scope))
    return LeerfeedbackAnalyse(
        suggesties=suggesties,
        totaal_geanalyseerde_projecten=len(nacalculaties),
        scopes_met_voldoende_data=voldoende,
        scopes_zonder_suggestie=zonder,
    )


def validate_suggestion(suggestie: ScopeSuggestie) -> List[str]:
    """Waarschuwingen vóór toepassen; lege lijst = geldig."""
    warnings: List[str] = []
    if suggestie.betrouwbaarheid == Betrouwbaarheid.LAAG:
        warnings.append(f"Lage betrouwbaarheid: gebaseerd op slechts {suggestie.aantal_projecten} projecten")

    pct = abs(suggestie.gemiddelde_afwijking_percentage)
    if pct > GROTE_AANPASSING:
        warnings.append(f"Grote aanpassing ({format_number(pct)}%): controleer of dit realistisch is")

    for a in suggestie.activiteiten:
        if a.gesuggereerde_waarde <= 0:
            warnings.append(f"Waarschuwing: {a.activiteit} zou een waarde van 0 of minder krijgen")
        if abs(a.wijziging_percentage) > GROTE_WIJZIGING:
            warnings.append(f"Grote wijziging voor {a.activiteit}: {format_number(a.wijziging_percentage)}%")
    return warnings


def get_suggestion_priority(suggestie: ScopeSuggestie) -> str:
    pct = abs(suggestie.gemiddelde_afwijking_percentage)
    if suggestie.betrouwbaarheid == Betrouwbaarheid.HOOG and pct > HOGE_PRIORITEIT_DREMPEL:
        return "hoog"
    if suggestie.betrouwbaarheid != Betrouwbaarheid.LAAG and pct > AFWIJKING_DREMPEL:
        return "gemiddeld"
    return "laag"


@dataclass(frozen=True)
class SuggestieImpact:
    uren_verschil: D
    kosten_verschil: D


def calculate_suggestion_impact(
    suggestie: ScopeSuggestie,
    gemiddelde_project_uren: D,
    uurtarief: Optional[D] = None,
) -> SuggestieImpact:
    """Geschatte uren (en kosten, als er een uurtarief is) die erbij of eraf gaan per gemiddeld project."""
    uren = suggestie.gemiddelde_afwijking_percentage / HUNDRED * (
        D(gemiddelde_project_uren) / suggestie.aantal_projecten
    )
    kosten = round2(uren * D(uurtarief)) if uurtarief is not None else ZERO
    return SuggestieImpact(uren_verschil=pct1(uren), kosten_verschil=kosten)


def apply_suggestion(normuren: Sequence[Normuur], suggestie: ScopeSuggestie) -> List[Normuur]:
    """Expliciet toepassen: nieuwe normuur-rijen voor de scope, rest ongewijzigd."""
    nieuw = {a.activiteit.lower(): a.gesuggereerde_waarde for a in suggestie.activiteiten}
    out: List[Normuur] = []
    for n in normuren:
        if n.scope == suggestie.scope and n.activiteit.lower() in nieuw:
            out.append(
                Normuur(
                    scope=n.scope,
                    activiteit=n.activiteit,
                    normuur_per_eenheid=nieuw[n.activiteit.lower()],
                    eenheid=n.eenheid,
                    omschrijving=n.omschrijving,
                )
            )
        else:
            out.append(n)
    return out
