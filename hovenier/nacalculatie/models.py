from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from hovenier.domain.enums import DeviationStatus, InsightType

D = Decimal


@dataclass(frozen=True)
class UrenRegistratie:
    """Eén regel uit het urenlog (append-only). Zonder scope telt alleen mee in het totaal."""

    datum: date
    medewerker: str
    uren: D
    scope: Optional[str] = None
    notities: Optional[str] = None


@dataclass(frozen=True)
class MachineGebruik:
    datum: date
    uren: D
    kosten: D
    machine: Optional[str] = None


@dataclass(frozen=True)
class ScopeAfwijking:
    scope: str
    geplande_uren: D
    werkelijke_uren: D
    afwijking_uren: D
    afwijking_percentage: D
    status: DeviationStatus


@dataclass(frozen=True)
class NacalculatieInsight:
    type: InsightType
    title: str
    description: str
    scope: Optional[str] = None


@dataclass(frozen=True)
class NacalculatieResult:
    # totalen
    geplande_uren: D
    werkelijke_uren: D
    geplande_dagen: D
    werkelijke_dagen: int
    geplande_machine_kosten: D
    werkelijke_machine_kosten: D

    # afwijkingen
    afwijking_uren: D
    afwijking_percentage: D
    afwijking_dagen: D
    afwijking_machine_kosten: D
    afwijking_machine_kosten_percentage: D

    status: DeviationStatus

    afwijkingen_per_scope: List[ScopeAfwijking] = field(default_factory=list)
    werkelijke_uren_per_scope: Dict[str, D] = field(default_factory=dict)
    afwijkingen_per_scope_map: Dict[str, D] = field(default_factory=dict)

    insights: List[NacalculatieInsight] = field(default_factory=list)

    aantal_registraties: int = 0
    aantal_medewerkers: int = 0
