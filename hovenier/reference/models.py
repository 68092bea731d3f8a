from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Optional, Tuple

D = Decimal

logger = logging.getLogger(__name__)

NEUTRAL = D("1.0")


@dataclass(frozen=True)
class Normuur:
    scope: str
    activiteit: str
    normuur_per_eenheid: D
    eenheid: str
    omschrijving: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str]:
        return (self.scope, self.activiteit.lower())


@dataclass(frozen=True)
class Product:
    productnaam: str
    categorie: str
    verkoopprijs: D
    eenheid: str
    inkoopprijs: D = D("0")
    verliespercentage: D = D("0")
    actief: bool = True


@dataclass(frozen=True)
class ReferenceData:
    """
    Read-only referentietabellen voor één berekening:
    normuren, correctiefactoren en prijsboek.

    Gaten in de data zijn geen fouten: ontbrekende normuur/product -> None,
    onbekend factorniveau -> 1.0 (neutraal).
    """

    normuren: Tuple[Normuur, ...] = ()
    correctiefactoren: Mapping[str, Mapping[str, D]] = field(default_factory=dict)
    producten: Tuple[Product, ...] = ()
    _normuur_index: Dict[Tuple[str, str], Normuur] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: Dict[Tuple[str, str], Normuur] = {}
        for n in self.normuren:
            # eerste rij wint (tabelvolgorde)
            index.setdefault(n.key, n)
        object.__setattr__(self, "_normuur_index", index)

    # --- normuren ---

    def find_normuur(self, scope: str, activiteit: str) -> Optional[Normuur]:
        found = self._normuur_index.get((str(scope), activiteit.lower()))
        if found is None:
            logger.debug("normuur missing: scope=%s activiteit=%s", scope, activiteit)
        return found

    def normuren_for_scope(self, scope: str) -> Tuple[Normuur, ...]:
        return tuple(n for n in self.normuren if n.scope == scope)

    # --- correctiefactoren ---

    def factor(self, categorie: str, niveau: Optional[str]) -> D:
        if niveau is None:
            return NEUTRAL
        levels = self.correctiefactoren.get(str(categorie))
        if not levels or str(niveau) not in levels:
            logger.debug("correction factor missing: %s=%s (using 1.0)", categorie, niveau)
            return NEUTRAL
        return levels[str(niveau)]

    def with_factor_overrides(self, overrides: Mapping[str, Mapping[str, D]]) -> "ReferenceData":
        """Gebruikersfactoren over de systeemtabel heen leggen (per categorie/niveau)."""
        merged: Dict[str, Dict[str, D]] = {k: dict(v) for k, v in self.correctiefactoren.items()}
        for categorie, levels in overrides.items():
            target = merged.setdefault(str(categorie), {})
            for niveau, value in levels.items():
                target[str(niveau)] = D(str(value))
        return ReferenceData(normuren=self.normuren, correctiefactoren=merged, producten=self.producten)

    # --- prijsboek ---

    def find_product(self, term: str, categorie: Optional[str] = None) -> Optional[Product]:
        """Eerste actieve product (tabelvolgorde) waarvan de naam `term` bevat."""
        needle = term.lower()
        for p in self.producten:
            if not p.actief:
                continue
            if categorie is not None and p.categorie != categorie:
                continue
            if needle in p.productnaam.lower():
                return p
        logger.debug("product missing: term=%s categorie=%s", term, categorie)
        return None

    def products_in(self, categorie: str, zoekterm: Optional[str] = None) -> Tuple[Product, ...]:
        out = [p for p in self.producten if p.actief and p.categorie == categorie]
        if zoekterm:
            out = [p for p in out if zoekterm.lower() in p.productnaam.lower()]
        return tuple(out)


def build_reference(
    normuren: Iterable[Normuur] = (),
    correctiefactoren: Optional[Mapping[str, Mapping[str, D]]] = None,
    producten: Iterable[Product] = (),
) -> ReferenceData:
    return ReferenceData(
        normuren=tuple(normuren),
        correctiefactoren={k: dict(v) for k, v in (correctiefactoren or {}).items()},
        producten=tuple(producten),
    )
