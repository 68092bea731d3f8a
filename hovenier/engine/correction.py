from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence, Tuple

from hovenier.domain.enums import FactorCategorie
from hovenier.reference.models import ReferenceData

D = Decimal

# Vaste volgorde waarin de generieke correcties worden toegepast
FACTOR_ORDER: Tuple[FactorCategorie, ...] = (
    FactorCategorie.BEREIKBAARHEID,
    FactorCategorie.ACHTERSTALLIGHEID,
    FactorCategorie.COMPLEXITEIT,
    FactorCategorie.INTENSITEIT,
    FactorCategorie.SNIJWERK,
)


@dataclass(frozen=True)
class ResolvedFactor:
    """Een toegepaste factor, inclusief delta voor weergave/audit."""

    categorie: str
    niveau: str
    factor: D

    @property
    def delta_percentage(self) -> D:
        return (self.factor - D("1")) * D("100")

    def describe(self) -> str:
        sign = "+" if self.delta_percentage > 0 else ""
        return f"{self.categorie} {self.niveau} x{self.factor} ({sign}{self.delta_percentage.normalize():f}%)"


@dataclass(frozen=True)
class FactorSelection:
    """
    Gekozen niveaus per categorie. None = niet van toepassing (factor 1.0).
    extra: scope-specifieke (categorie, niveau) paren, na de generieke factoren toegepast.
    """

    bereikbaarheid: Optional[str] = None
    achterstalligheid: Optional[str] = None
    complexiteit: Optional[str] = None
    intensiteit: Optional[str] = None
    snijwerk: Optional[str] = None
    extra: Tuple[Tuple[str, str], ...] = ()

    def level_for(self, categorie: FactorCategorie) -> Optional[str]:
        return getattr(self, categorie.value)

    def with_extra(self, *pairs: Tuple[str, Optional[str]]) -> "FactorSelection":
        kept = tuple((c, n) for c, n in pairs if n is not None)
        return FactorSelection(
            bereikbaarheid=self.bereikbaarheid,
            achterstalligheid=self.achterstalligheid,
            complexiteit=self.complexiteit,
            intensiteit=self.intensiteit,
            snijwerk=self.snijwerk,
            extra=self.extra + kept,
        )


@dataclass(frozen=True)
class CorrectedHours:
    basis_uren: D
    uren: D
    factoren: Tuple[ResolvedFactor, ...]

    @property
    def total_factor(self) -> D:
        out = D("1")
        for f in self.factoren:
            out *= f.factor
        return out


class CorrectionFactorEngine:
    """
    Zoekt factoren op in de correctietabel en past ze multiplicatief toe.
    Volgorde: bereikbaarheid -> achterstalligheid -> complexiteit -> intensiteit -> snijwerk,
    daarna eventuele scope-specifieke factoren en toeslagen.
    """

    def __init__(self, reference: ReferenceData):
        self.reference = reference

    def resolve(self, selection: FactorSelection) -> Tuple[ResolvedFactor, ...]:
        out = []
        for categorie in FACTOR_ORDER:
            niveau = selection.level_for(categorie)
            if niveau is None:
                continue
            out.append(ResolvedFactor(categorie.value, str(niveau), self.reference.factor(categorie.value, niveau)))
        for categorie, niveau in selection.extra:
            out.append(ResolvedFactor(str(categorie), str(niveau), self.reference.factor(categorie, niveau)))
        return tuple(out)

    def apply(
        self,
        basis_uren: D,
        selection: FactorSelection,
        toeslagen: Sequence[ResolvedFactor] = (),
    ) -> CorrectedHours:
        factoren = self.resolve(selection) + tuple(toeslagen)
        uren = D(basis_uren)
        for f in factoren:
            uren = uren * f.factor
        return CorrectedHours(basis_uren=D(basis_uren), uren=uren, factoren=factoren)
