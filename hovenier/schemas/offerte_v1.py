# hovenier/schemas/offerte_v1.py
from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, condecimal

from hovenier.domain.enums import Achterstalligheid, Bereikbaarheid, Complexiteit, RegelType
from hovenier.domain.scopes import ScopeInput

Percentage = condecimal(ge=0, le=100)
Factor = condecimal(gt=0)


class GarantiepakketV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    naam: str = Field(min_length=1)
    prijs: condecimal(ge=0)  # type: ignore


class OfferteCalculateInputV1(BaseModel):
    """
    Invoer = allowlist. Scopes zijn de getypte varianten; een aanwezige scope
    zonder verplichte maten wordt hier al met 422 geweigerd.
    """

    model_config = ConfigDict(extra="forbid")

    offerte_id: Optional[str] = None
    project_id: Optional[str] = None

    scopes: List[ScopeInput] = Field(min_length=1)  # type: ignore
    bereikbaarheid: Bereikbaarheid = Bereikbaarheid.GOED
    achterstalligheid: Optional[Achterstalligheid] = None
    complexiteit: Optional[Complexiteit] = None

    # overrides op de instellingen (None = default uit settings)
    uurtarief: Optional[condecimal(ge=0)] = None  # type: ignore
    marge_percentage: Optional[Percentage] = None  # type: ignore
    btw_percentage: Optional[Percentage] = None  # type: ignore
    scope_marges: Dict[str, Percentage] = Field(default_factory=dict)  # type: ignore
    correctiefactoren: Dict[str, Dict[str, Factor]] = Field(default_factory=dict)  # type: ignore

    include_overhead: bool = False
    garantiepakket: Optional[GarantiepakketV1] = None
    strict: bool = False


class OfferteRegelV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    scope: str
    omschrijving: str
    eenheid: str
    hoeveelheid: Decimal
    prijs_per_eenheid: Decimal
    totaal: Decimal
    type: RegelType
    marge_percentage: Optional[Decimal] = None


class OfferteTotalenV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    materiaalkosten: Decimal
    arbeidskosten: Decimal
    machinekosten: Decimal
    totaal_uren: Decimal
    subtotaal: Decimal
    marge: Decimal
    marge_percentage: Decimal
    totaal_ex_btw: Decimal
    btw: Decimal
    totaal_incl_btw: Decimal


class NoteV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    code: str
    message: str


class OfferteOutputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: Literal["v1"] = "v1"
    offerte_id: str
    regels: List[OfferteRegelV1]
    totalen: OfferteTotalenV1
    uren_per_scope: Dict[str, Decimal]
    notes: List[NoteV1] = Field(default_factory=list)
    # uitleg per scope, read-only voor de UI
    breakdown: Dict[str, List[str]] = Field(default_factory=dict)
