from __future__ import annotations

import logging
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence

from hovenier.domain.enums import Scope
from hovenier.domain.errors import UnknownScopeError
from hovenier.domain.scopes import ScopeInputBase
from hovenier.engine.context import (
    CalcContext,
    EquipmentItem,
    LaborItem,
    MaterialQuantity,
    PolicyNote,
    ScopeResult,
    ServiceItem,
)
from hovenier.engine.correction import FactorSelection, ResolvedFactor

D = Decimal

logger = logging.getLogger(__name__)

ScopeCalculator = Callable[[ScopeInputBase, CalcContext], ScopeResult]

# Registry: scope -> pure calculator function
calculator_registry: Dict[Scope, ScopeCalculator] = {}


def register(scope: Scope) -> Callable[[ScopeCalculator], ScopeCalculator]:
    """
    Decorator to register a calculator for a scope.
    Fails fast on duplicate registrations (useful during dev/reload).
    """

    def decorator(fn: ScopeCalculator) -> ScopeCalculator:
        existing = calculator_registry.get(scope)
        if existing is not None and existing is not fn:
            raise ValueError(
                f"Duplicate calculator registration for scope '{scope.value}': "
                f"{existing.__name__} vs {fn.__name__}"
            )
        calculator_registry[scope] = fn
        return fn

    return decorator


def calculate_scope(inp: ScopeInputBase, ctx: CalcContext, strict: bool = False) -> ScopeResult:
    """
    Eén scope doorrekenen. Niet aanwezig -> exact nul (geen uren, geen materiaal).
    Scope zonder calculator telt als nul, tenzij strict.
    """
    scope = inp.scope_key
    if not inp.aanwezig:
        return ScopeResult.empty(scope)

    fn = calculator_registry.get(scope)
    if fn is None:
        if strict:
            raise UnknownScopeError(f"no calculator registered for scope '{scope.value}'")
        logger.warning("no calculator for scope=%s, contributing zero", scope.value)
        return ScopeResult.empty(scope)

    return fn(inp, ctx)


class ScopeResultBuilder:
    """
    Verzamelt regels voor één scope.
    Uren komen altijd uit de normuren-tabel; prijzen uit het prijsboek.
    Ontbreekt een rij, dan draagt die post niets bij (gelogd), de rest gaat door.
    """

    def __init__(self, scope: Scope, ctx: CalcContext):
        self.scope = scope
        self.ctx = ctx
        self._labor: List[LaborItem] = []
        self._materials: List[MaterialQuantity] = []
        self._services: List[ServiceItem] = []
        self._equipment: List[EquipmentItem] = []
        self._notes: List[PolicyNote] = []

    # --- arbeid ---

    def labor(
        self,
        activiteit: str,
        hoeveelheid: D,
        omschrijving: str,
        selection: Optional[FactorSelection],
        toeslagen: Sequence[ResolvedFactor] = (),
        marge_percentage: Optional[D] = None,
    ) -> Optional[LaborItem]:
        hoeveelheid = D(hoeveelheid)
        if hoeveelheid <= 0:
            return None

        normuur = self.ctx.reference.find_normuur(self.scope.value, activiteit)
        if normuur is None:
            logger.debug("reference gap: no normuur for %s/%s, line skipped", self.scope.value, activiteit)
            return None

        basis = hoeveelheid * normuur.normuur_per_eenheid
        corrected = self.ctx.factors.apply(basis, selection or FactorSelection(), toeslagen)
        item = LaborItem(
            omschrijving=omschrijving,
            activiteit=normuur.activiteit,
            hoeveelheid=hoeveelheid,
            eenheid=normuur.eenheid,
            normuur_per_eenheid=normuur.normuur_per_eenheid,
            basis_uren=corrected.basis_uren,
            uren=corrected.uren,
            factoren=corrected.factoren,
            marge_percentage=marge_percentage,
        )
        self._labor.append(item)
        return item

    def labor_hours(self, uren: D, omschrijving: str, selection: Optional[FactorSelection]) -> Optional[LaborItem]:
        """Vrij opgegeven uren (geen normuur), wel gecorrigeerd."""
        uren = D(uren)
        if uren <= 0:
            return None
        corrected = self.ctx.factors.apply(uren, selection or FactorSelection())
        item = LaborItem(
            omschrijving=omschrijving,
            activiteit="vrije uren",
            hoeveelheid=uren,
            eenheid="uur",
            normuur_per_eenheid=D("1"),
            basis_uren=corrected.basis_uren,
            uren=corrected.uren,
            factoren=corrected.factoren,
        )
        self._labor.append(item)
        return item

    # --- materiaal / diensten / machines ---

    def material(
        self,
        term: str,
        omschrijving: str,
        hoeveelheid: D,
        categorie: Optional[str] = None,
        verliespercentage: Optional[D] = None,
        marge_percentage: Optional[D] = None,
    ) -> Optional[MaterialQuantity]:
        hoeveelheid = D(hoeveelheid)
        if hoeveelheid <= 0:
            return None
        product = self.ctx.reference.find_product(term, categorie)
        if product is None:
            logger.debug("reference gap: no product for '%s' (%s), line skipped", term, self.scope.value)
            return None

        item = MaterialQuantity(
            omschrijving=omschrijving,
            hoeveelheid=hoeveelheid,
            eenheid=product.eenheid,
            prijs_per_eenheid=product.verkoopprijs,
            verliespercentage=(
                product.verliespercentage if verliespercentage is None else D(verliespercentage)
            ),
            marge_percentage=marge_percentage,
        )
        self._materials.append(item)
        return item

    def service(self, term: str, omschrijving: str, hoeveelheid: D) -> Optional[ServiceItem]:
        product = self.ctx.reference.find_product(term, "dienst")
        if product is None:
            logger.debug("reference gap: no service product for '%s', line skipped", term)
            return None
        return self.fixed_service(omschrijving, hoeveelheid, product.eenheid, product.verkoopprijs)

    def fixed_service(self, omschrijving: str, hoeveelheid: D, eenheid: str, prijs: D) -> ServiceItem:
        item = ServiceItem(
            omschrijving=omschrijving,
            hoeveelheid=D(hoeveelheid),
            eenheid=eenheid,
            prijs_per_eenheid=D(prijs),
        )
        self._services.append(item)
        return item

    def equipment(self, term: str, omschrijving: str, hoeveelheid: D) -> Optional[EquipmentItem]:
        product = self.ctx.reference.find_product(term, "machine")
        if product is None:
            logger.debug("reference gap: no machine product for '%s', line skipped", term)
            return None
        item = EquipmentItem(
            omschrijving=omschrijving,
            hoeveelheid=D(hoeveelheid),
            eenheid=product.eenheid,
            prijs_per_eenheid=product.verkoopprijs,
        )
        self._equipment.append(item)
        return item

    def note(self, code: str, message: str) -> None:
        self._notes.append(PolicyNote(code=code, message=message))

    def build(self) -> ScopeResult:
        return ScopeResult(
            scope=self.scope,
            labor=tuple(self._labor),
            materials=tuple(self._materials),
            services=tuple(self._services),
            equipment=tuple(self._equipment),
            notes=tuple(self._notes),
        )


def frequency_factor(frequentie: int) -> List[ResolvedFactor]:
    if frequentie <= 1:
        return []
    return [ResolvedFactor("frequentie", f"{frequentie}x per jaar", D(frequentie))]
