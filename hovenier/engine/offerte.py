from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Sequence, Union

from hovenier.calculators import calculate_scope
from hovenier.config import CalculationConfig
from hovenier.domain.enums import Achterstalligheid, Bereikbaarheid, Complexiteit
from hovenier.domain.scopes import ScopeInputBase, parse_scope
from hovenier.reference.models import ReferenceData

from .context import CalcContext, ScopeResult
from .quote_aggregator import OfferteBerekening, OfferteRegel, QuoteAggregator, garantie_regel, overhead_regel

D = Decimal

logger = logging.getLogger(__name__)

ScopeLike = Union[ScopeInputBase, Mapping[str, Any]]


def _as_scope(item: ScopeLike) -> ScopeInputBase:
    if isinstance(item, ScopeInputBase):
        return item
    return parse_scope(dict(item))


def calculate_results(scopes: Sequence[ScopeLike], ctx: CalcContext, strict: bool = False) -> List[ScopeResult]:
    return [calculate_scope(_as_scope(s), ctx, strict=strict) for s in scopes]


def calculate_offerte(
    scopes: Sequence[ScopeLike],
    reference: ReferenceData,
    config: Optional[CalculationConfig] = None,
    bereikbaarheid: Bereikbaarheid = Bereikbaarheid.GOED,
    achterstalligheid: Optional[Achterstalligheid] = None,
    complexiteit: Optional[Complexiteit] = None,
    scope_marges: Optional[Mapping[str, D]] = None,
    include_overhead: bool = False,
    garantiepakket: Optional[Mapping[str, Any]] = None,
    strict: bool = False,
) -> OfferteBerekening:
    """
    Volledige offerte: scopes -> calculators -> correcties -> regels + totalen.

    garantiepakket: {"naam": ..., "prijs": ...}; wordt als losse materiaalregel meegenomen.
    include_overhead: vaste voorbereidingskosten (config.offerte_overhead) als arbeidsregel.
    """
    cfg = config or CalculationConfig()
    ctx = CalcContext(
        reference=reference,
        config=cfg,
        bereikbaarheid=bereikbaarheid,
        achterstalligheid=achterstalligheid,
        complexiteit=complexiteit,
    )

    results = calculate_results(scopes, ctx, strict=strict)

    extra: List[OfferteRegel] = []
    if include_overhead and cfg.offerte_overhead > 0:
        extra.append(overhead_regel(cfg.offerte_overhead))
    if garantiepakket:
        extra.append(garantie_regel(str(garantiepakket["naam"]), D(str(garantiepakket["prijs"]))))

    berekening = QuoteAggregator(cfg).aggregate(results, scope_marges=scope_marges, extra_regels=extra)
    logger.info(
        "offerte calculated: scopes=%d regels=%d uren=%s totaal_incl_btw=%s",
        len(results),
        len(berekening.regels),
        berekening.totalen.totaal_uren,
        berekening.totalen.totaal_incl_btw,
    )
    return berekening
