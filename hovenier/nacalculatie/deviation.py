from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from functools import reduce
from typing import Dict, List, Optional, Sequence

from hovenier.config import CalculationConfig
from hovenier.domain.enums import DeviationStatus, RegelType
from hovenier.engine.quote_aggregator import OfferteRegel
from hovenier.engine.rounding import pct1, percentage_of, round2
from hovenier.planning.voorcalculatie import VoorcalculatieData

from .insights import generate_insights
from .models import MachineGebruik, NacalculatieResult, ScopeAfwijking, UrenRegistratie

D = Decimal
ZERO = D("0")
HUNDRED = D("100")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeviationThresholds:
    """Grenzen (inclusief) in procenten, symmetrisch rond nul."""

    good: D = D("5")
    warning: D = D("15")

    @classmethod
    def from_config(cls, config: CalculationConfig) -> "DeviationThresholds":
        return cls(good=config.deviation_good_pct, warning=config.deviation_warning_pct)


DEFAULT_THRESHOLDS = DeviationThresholds()


def get_deviation_status(percentage: D, thresholds: DeviationThresholds = DEFAULT_THRESHOLDS) -> DeviationStatus:
    """|%| <= good -> good, |%| <= warning -> warning, anders critical. Eén plek voor scope en totaal."""
    pct = abs(D(percentage))
    if pct <= thresholds.good:
        return DeviationStatus.GOOD
    if pct <= thresholds.warning:
        return DeviationStatus.WARNING
    return DeviationStatus.CRITICAL


def deviation_percentage(geplande_uren: D, werkelijke_uren: D) -> D:
    """Niet gepland maar wel gewerkt = 100 % overschrijding; niets gepland en niets gewerkt = 0."""
    if geplande_uren > 0:
        return pct1(percentage_of(werkelijke_uren - geplande_uren, geplande_uren))
    if werkelijke_uren > 0:
        return HUNDRED
    return ZERO


def _add_uren(acc: Dict[str, D], reg: UrenRegistratie) -> Dict[str, D]:
    if not reg.scope:
        return acc
    out = dict(acc)
    out[reg.scope] = out.get(reg.scope, ZERO) + D(reg.uren)
    return out


def werkelijke_uren_per_scope(registraties: Sequence[UrenRegistratie]) -> Dict[str, D]:
    acc = reduce(_add_uren, registraties, {})
    return {k: acc[k] for k in sorted(acc)}


def scope_afwijkingen(
    gepland: Dict[str, D],
    werkelijk: Dict[str, D],
    thresholds: DeviationThresholds = DEFAULT_THRESHOLDS,
) -> List[ScopeAfwijking]:
    out: List[ScopeAfwijking] = []
    for scope in set(gepland) | set(werkelijk):
        g = D(gepland.get(scope, ZERO))
        w = D(werkelijk.get(scope, ZERO))
        pct = deviation_percentage(g, w)
        out.append(
            ScopeAfwijking(
                scope=scope,
                geplande_uren=g,
                werkelijke_uren=w,
                afwijking_uren=round2(w - g),
                afwijking_percentage=pct,
                status=get_deviation_status(pct, thresholds),
            )
        )
    # grootste afwijking eerst; bij gelijke stand op scopenaam
    out.sort(key=lambda a: (-abs(a.afwijking_percentage), a.scope))
    return out


def calculate_nacalculatie(
    voorcalculatie: VoorcalculatieData,
    uren: Sequence[UrenRegistratie],
    machines: Sequence[MachineGebruik] = (),
    offerte_regels: Optional[Sequence[OfferteRegel]] = None,
    thresholds: DeviationThresholds = DEFAULT_THRESHOLDS,
) -> NacalculatieResult:
    """
    Gepland (voorcalculatie) tegen werkelijk (uren- en machinelog).
    Puur: dezelfde logs in willekeurige volgorde geven dezelfde uitkomst.
    """
    werkelijke_uren = sum((D(r.uren) for r in uren), ZERO)
    werkelijke_dagen = len({r.datum for r in uren})
    aantal_medewerkers = len({r.medewerker for r in uren})

    werkelijke_machine = sum((D(m.kosten) for m in machines), ZERO)
    geplande_machine = sum(
        (r.totaal for r in (offerte_regels or ()) if r.type == RegelType.MACHINE),
        ZERO,
    )

    per_scope = werkelijke_uren_per_scope(uren)
    afwijkingen = scope_afwijkingen(voorcalculatie.norm_uren_per_scope, per_scope, thresholds)

    gepland_totaal = voorcalculatie.norm_uren_totaal
    afwijking_uren = werkelijke_uren - gepland_totaal
    afwijking_pct = pct1(percentage_of(afwijking_uren, gepland_totaal)) if gepland_totaal > 0 else ZERO

    afwijking_dagen = D(werkelijke_dagen) - voorcalculatie.geschatte_dagen

    afwijking_machine = werkelijke_machine - geplande_machine
    afwijking_machine_pct = (
        pct1(percentage_of(afwijking_machine, geplande_machine)) if geplande_machine > 0 else ZERO
    )

    result = NacalculatieResult(
        geplande_uren=gepland_totaal,
        werkelijke_uren=werkelijke_uren,
        geplande_dagen=voorcalculatie.geschatte_dagen,
        werkelijke_dagen=werkelijke_dagen,
        geplande_machine_kosten=geplande_machine,
        werkelijke_machine_kosten=werkelijke_machine,
        afwijking_uren=round2(afwijking_uren),
        afwijking_percentage=afwijking_pct,
        afwijking_dagen=afwijking_dagen,
        afwijking_machine_kosten=round2(afwijking_machine),
        afwijking_machine_kosten_percentage=afwijking_machine_pct,
        status=get_deviation_status(afwijking_pct, thresholds),
        afwijkingen_per_scope=afwijkingen,
        werkelijke_uren_per_scope=per_scope,
        afwijkingen_per_scope_map={a.scope: a.afwijking_uren for a in sorted(afwijkingen, key=lambda a: a.scope)},
        aantal_registraties=len(uren),
        aantal_medewerkers=aantal_medewerkers,
    )

    insights = generate_insights(result, thresholds)
    logger.info(
        "nacalculatie: gepland=%s werkelijk=%s afwijking=%s%% status=%s insights=%d",
        gepland_totaal,
        werkelijke_uren,
        afwijking_pct,
        result.status.value,
        len(insights),
    )
    return replace(result, insights=insights)
