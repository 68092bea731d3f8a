from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Mapping, Optional, Sequence

from hovenier.config import CalculationConfig
from hovenier.engine.context import ScopeResult
from hovenier.engine.quote_aggregator import OfferteBerekening, OfferteRegel
from hovenier.engine.quote_aggregator import uren_per_scope as geoffreerde_uren
from hovenier.engine.rounding import ceil_int, round2

D = Decimal
ZERO = D("0")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoorcalculatieData:
    """Geplande uren per project; basis voor planning en nacalculatie."""

    norm_uren_totaal: D
    geschatte_dagen: D
    norm_uren_per_scope: Dict[str, D] = field(default_factory=dict)
    team_grootte: int = 2
    effectieve_uren_per_dag: D = D("6")

    def __post_init__(self) -> None:
        if self.team_grootte not in (2, 3, 4):
            raise ValueError(f"team_grootte must be 2, 3 or 4 (got {self.team_grootte})")


def werkdagen(hours: D, team_grootte: int, effectieve_uren_per_dag: D) -> D:
    """
    Uren -> hele werkdagen voor het team (altijd naar boven).
    Geen capaciteit geeft 0 dagen.
    """
    capaciteit = D(team_grootte) * D(effectieve_uren_per_dag)
    if capaciteit <= 0:
        return ZERO
    return D(ceil_int(D(hours) / capaciteit))


def build_voorcalculatie(
    results: Sequence[ScopeResult],
    regels: Sequence[OfferteRegel],
    config: Optional[CalculationConfig] = None,
) -> VoorcalculatieData:
    """
    Normuren per scope zoals geoffreerd: som van de kwartier-afgeronde uurregels.
    Heeft een scope geen uurregels, dan telt het (afgeronde) scope-resultaat.
    """
    cfg = config or CalculationConfig()
    per_scope: Dict[str, D] = dict(geoffreerde_uren(regels))

    for r in results:
        key = r.scope.value
        if per_scope.get(key, ZERO) <= 0 and r.rounded_hours > 0:
            logger.debug("voorcalculatie: scope %s from scope result (%s uur)", key, r.rounded_hours)
            per_scope[key] = per_scope.get(key, ZERO) + r.rounded_hours

    return voorcalculatie_from_hours(per_scope, cfg)


def voorcalculatie_from_hours(
    uren_per_scope: Mapping[str, D],
    config: Optional[CalculationConfig] = None,
) -> VoorcalculatieData:
    cfg = config or CalculationConfig()
    per_scope = {k: round2(D(v)) for k, v in sorted(uren_per_scope.items()) if D(v) > 0}
    totaal = sum(per_scope.values(), ZERO)
    return VoorcalculatieData(
        norm_uren_totaal=round2(totaal),
        geschatte_dagen=werkdagen(totaal, cfg.team_grootte, cfg.effectieve_uren_per_dag),
        norm_uren_per_scope=per_scope,
        team_grootte=cfg.team_grootte,
        effectieve_uren_per_dag=cfg.effectieve_uren_per_dag,
    )


def voorcalculatie_for_offerte(
    berekening: OfferteBerekening,
    config: Optional[CalculationConfig] = None,
) -> VoorcalculatieData:
    return build_voorcalculatie(berekening.results, berekening.regels, config)


def duration_with_buffer(dagen: D, buffer_percentage: D) -> int:
    """Doorlooptijd in hele werkdagen incl. weerbuffer (altijd naar boven)."""
    if dagen <= 0:
        return 0
    return ceil_int(D(dagen) * (D("1") + D(buffer_percentage) / D("100")))
