from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

from hovenier.config import CalculationConfig
from hovenier.domain.enums import Achterstalligheid, Bereikbaarheid, Complexiteit, Scope
from hovenier.reference.models import ReferenceData

from .correction import CorrectionFactorEngine, FactorSelection, ResolvedFactor
from .rounding import round_to_quarter

D = Decimal


@dataclass(frozen=True)
class LaborItem:
    """Arbeid: basishoeveelheid x normuur, daarna gecorrigeerd. uren is ongerond."""

    omschrijving: str
    activiteit: str
    hoeveelheid: D
    eenheid: str
    normuur_per_eenheid: D
    basis_uren: D
    uren: D
    factoren: Tuple[ResolvedFactor, ...] = ()
    marge_percentage: Optional[D] = None


@dataclass(frozen=True)
class MaterialQuantity:
    omschrijving: str
    hoeveelheid: D
    eenheid: str
    prijs_per_eenheid: D
    verliespercentage: D = D("0")
    marge_percentage: Optional[D] = None

    @property
    def hoeveelheid_met_verlies(self) -> D:
        return self.hoeveelheid * (D("1") + self.verliespercentage / D("100"))


@dataclass(frozen=True)
class ServiceItem:
    """Arbeid tegen vaste prijs (telt niet mee in uren)."""

    omschrijving: str
    hoeveelheid: D
    eenheid: str
    prijs_per_eenheid: D
    marge_percentage: Optional[D] = None


@dataclass(frozen=True)
class EquipmentItem:
    omschrijving: str
    hoeveelheid: D
    eenheid: str
    prijs_per_eenheid: D


@dataclass(frozen=True)
class PolicyNote:
    code: str
    message: str


@dataclass(frozen=True)
class ScopeResult:
    scope: Scope
    labor: Tuple[LaborItem, ...] = ()
    materials: Tuple[MaterialQuantity, ...] = ()
    services: Tuple[ServiceItem, ...] = ()
    equipment: Tuple[EquipmentItem, ...] = ()
    notes: Tuple[PolicyNote, ...] = ()

    @classmethod
    def empty(cls, scope: Scope) -> "ScopeResult":
        return cls(scope=scope)

    @property
    def hours(self) -> D:
        return sum((item.uren for item in self.labor), D("0"))

    @property
    def rounded_hours(self) -> D:
        return round_to_quarter(self.hours)

    @property
    def is_empty(self) -> bool:
        return not (self.labor or self.materials or self.services or self.equipment)


@dataclass(frozen=True)
class CalcContext:
    """
    Alles wat een calculator mag lezen: referentietabellen, config en
    de offerte-brede factoren. Geen I/O, geen mutatie.
    """

    reference: ReferenceData
    config: CalculationConfig = field(default_factory=CalculationConfig)
    bereikbaarheid: Bereikbaarheid = Bereikbaarheid.GOED
    achterstalligheid: Optional[Achterstalligheid] = None
    complexiteit: Optional[Complexiteit] = None

    @property
    def factors(self) -> CorrectionFactorEngine:
        return CorrectionFactorEngine(self.reference)

    def aanleg_selection(self, **levels: Optional[str]) -> FactorSelection:
        return FactorSelection(
            bereikbaarheid=self.bereikbaarheid.value,
            complexiteit=self.complexiteit.value if self.complexiteit else None,
            **levels,
        )

    def onderhoud_selection(self, with_backlog: bool = True) -> FactorSelection:
        return FactorSelection(
            bereikbaarheid=self.bereikbaarheid.value,
            achterstalligheid=(
                self.achterstalligheid.value if (with_backlog and self.achterstalligheid) else None
            ),
        )

    def basic_selection(self) -> FactorSelection:
        return FactorSelection(bereikbaarheid=self.bereikbaarheid.value)


def collect_notes(results: List[ScopeResult]) -> List[PolicyNote]:
    return [n for r in results for n in r.notes]
