from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from hovenier.domain.enums import SCOPE_ORDER, TaakStatus
from hovenier.domain.errors import HovenierError
from hovenier.engine.rounding import round2

from .templates import taken_for_scope

D = Decimal
ZERO = D("0")

logger = logging.getLogger(__name__)


class TaskNotFoundError(HovenierError):
    code = "TASK_NOT_FOUND"


@dataclass(frozen=True)
class PlanningTaak:
    id: str
    scope: str
    taak_naam: str
    norm_uren: D
    geschatte_dagen: D
    volgorde: int
    status: TaakStatus = TaakStatus.GEPLAND


@dataclass(frozen=True)
class PlanningResult:
    totaal_dagen: D
    taken: List[PlanningTaak]


@dataclass(frozen=True)
class ScopeVoortgang:
    uren: D
    dagen: D
    taken: int
    afgerond: int


@dataclass(frozen=True)
class PlanningSummary:
    totaal_uren: D
    totaal_dagen: D
    totaal_taken: int
    afgerond_taken: int
    gestart_taken: int
    voortgang: int
    per_scope: Dict[str, ScopeVoortgang]


def days_for_hours(hours: D, team_grootte: int, effectieve_uren_per_dag: D) -> D:
    """
    Uren -> werkdagen voor het hele team, op 2 decimalen.
    Geen capaciteit (0 uur per dag) geeft 0 dagen, geen deling door nul.
    """
    capaciteit = D(team_grootte) * D(effectieve_uren_per_dag)
    if capaciteit <= 0:
        return ZERO
    return round2(D(hours) / capaciteit)


def _scope_order(scope: str) -> tuple:
    # bekende scopes in vaste volgorde, onbekende alfabetisch erachter
    return (SCOPE_ORDER.get(scope, len(SCOPE_ORDER)), scope)


def size_planning(
    uren_per_scope: Mapping[str, D],
    team_grootte: int,
    effectieve_uren_per_dag: D,
) -> PlanningResult:
    taken: List[PlanningTaak] = []
    totaal_uren = ZERO
    volgorde = 0

    for scope in sorted(uren_per_scope, key=_scope_order):
        scope_uren = D(uren_per_scope[scope])
        if scope_uren <= 0:
            continue
        totaal_uren += scope_uren

        namen = taken_for_scope(scope)
        uren_per_taak = scope_uren / len(namen)
        for i, naam in enumerate(namen, start=1):
            taken.append(
                PlanningTaak(
                    id=f"taak_{scope}_{i}",
                    scope=scope,
                    taak_naam=naam,
                    norm_uren=round2(uren_per_taak),
                    geschatte_dagen=days_for_hours(uren_per_taak, team_grootte, effectieve_uren_per_dag),
                    volgorde=volgorde,
                )
            )
            volgorde += 1

    totaal_dagen = days_for_hours(totaal_uren, team_grootte, effectieve_uren_per_dag)
    logger.debug("planning sized: %d taken, %s uren, %s dagen", len(taken), totaal_uren, totaal_dagen)
    return PlanningResult(totaal_dagen=totaal_dagen, taken=taken)


def sorted_tasks(taken: Iterable[PlanningTaak]) -> List[PlanningTaak]:
    return sorted(taken, key=lambda t: (t.volgorde, t.id))


def reorder_tasks(taken: Sequence[PlanningTaak], volgorde: Mapping[str, int]) -> List[PlanningTaak]:
    """Nieuwe volgorde per taak-id; onbekende ids worden genegeerd, niet genoemde taken blijven staan."""
    out = [replace(t, volgorde=int(volgorde[t.id])) if t.id in volgorde else t for t in taken]
    return sorted_tasks(out)


def update_task_status(taken: Sequence[PlanningTaak], taak_id: str, status: TaakStatus) -> List[PlanningTaak]:
    if not any(t.id == taak_id for t in taken):
        raise TaskNotFoundError(f"taak niet gevonden: {taak_id}")
    return [replace(t, status=TaakStatus(status)) if t.id == taak_id else t for t in taken]


def add_task(
    taken: Sequence[PlanningTaak],
    scope: str,
    taak_naam: str,
    norm_uren: D,
    geschatte_dagen: D,
    taak_id: Optional[str] = None,
) -> List[PlanningTaak]:
    """Eigen taak achteraan toevoegen (volgorde = hoogste + 1)."""
    volgorde = max((t.volgorde for t in taken), default=-1) + 1
    new = PlanningTaak(
        id=taak_id or f"taak_{scope}_extra_{volgorde}",
        scope=scope,
        taak_naam=taak_naam,
        norm_uren=round2(norm_uren),
        geschatte_dagen=round2(geschatte_dagen),
        volgorde=volgorde,
    )
    return list(taken) + [new]


def summarize_tasks(taken: Sequence[PlanningTaak]) -> PlanningSummary:
    per_scope: Dict[str, ScopeVoortgang] = {}
    for t in taken:
        cur = per_scope.get(t.scope, ScopeVoortgang(ZERO, ZERO, 0, 0))
        per_scope[t.scope] = ScopeVoortgang(
            uren=cur.uren + t.norm_uren,
            dagen=cur.dagen + t.geschatte_dagen,
            taken=cur.taken + 1,
            afgerond=cur.afgerond + (1 if t.status == TaakStatus.AFGEROND else 0),
        )

    totaal = len(taken)
    afgerond = sum(1 for t in taken if t.status == TaakStatus.AFGEROND)
    gestart = sum(1 for t in taken if t.status == TaakStatus.GESTART)
    voortgang = int((D(afgerond) / D(totaal) * 100).quantize(D("1"), rounding=ROUND_HALF_UP)) if totaal else 0

    return PlanningSummary(
        totaal_uren=round2(sum((t.norm_uren for t in taken), ZERO)),
        totaal_dagen=round2(sum((t.geschatte_dagen for t in taken), ZERO)),
        totaal_taken=totaal,
        afgerond_taken=afgerond,
        gestart_taken=gestart,
        voortgang=voortgang,
        per_scope={k: per_scope[k] for k in sorted(per_scope, key=_scope_order)},
    )
