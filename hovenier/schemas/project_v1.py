# hovenier/schemas/project_v1.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, condecimal

from hovenier.domain.enums import Betrouwbaarheid, DeviationStatus, InsightType, TaakStatus


# -----------------------------
# Voorcalculatie / planning
# -----------------------------


class VoorcalculatieInputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    offerte_id: str = Field(min_length=1)
    team_grootte: Optional[Literal[2, 3, 4]] = None
    effectieve_uren_per_dag: Optional[condecimal(gt=0, le=24)] = None  # type: ignore
    buffer_percentage: Optional[condecimal(ge=0, le=100)] = None  # type: ignore


class VoorcalculatieOutputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project_id: str
    offerte_id: str
    norm_uren_totaal: Decimal
    geschatte_dagen: Decimal
    dagen_met_buffer: int
    norm_uren_per_scope: Dict[str, Decimal]
    team_grootte: int
    effectieve_uren_per_dag: Decimal


class PlanningTaakV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    scope: str
    taak_naam: str
    norm_uren: Decimal
    geschatte_dagen: Decimal
    volgorde: int
    status: TaakStatus


class ScopeVoortgangV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    uren: Decimal
    dagen: Decimal
    taken: int
    afgerond: int


class PlanningSummaryV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    totaal_uren: Decimal
    totaal_dagen: Decimal
    totaal_taken: int
    afgerond_taken: int
    gestart_taken: int
    voortgang: int
    per_scope: Dict[str, ScopeVoortgangV1]


class PlanningOutputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project_id: str
    totaal_dagen: Decimal
    taken: List[PlanningTaakV1]
    summary: PlanningSummaryV1


# -----------------------------
# Logs (append-only)
# -----------------------------


class UrenRegistratieV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    datum: date
    medewerker: str = Field(min_length=1)
    uren: condecimal(gt=0, le=24)  # type: ignore
    scope: Optional[str] = None
    notities: Optional[str] = None


class MachineGebruikV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    datum: date
    uren: condecimal(ge=0)  # type: ignore
    kosten: condecimal(ge=0)  # type: ignore
    machine: Optional[str] = None


# -----------------------------
# Nacalculatie
# -----------------------------


class ScopeAfwijkingV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scope: str
    geplande_uren: Decimal
    werkelijke_uren: Decimal
    afwijking_uren: Decimal
    afwijking_percentage: Decimal
    status: DeviationStatus


class InsightV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: InsightType
    title: str
    description: str
    scope: Optional[str] = None


class NacalculatieOutputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project_id: str
    geplande_uren: Decimal
    werkelijke_uren: Decimal
    geplande_dagen: Decimal
    werkelijke_dagen: int
    geplande_machine_kosten: Decimal
    werkelijke_machine_kosten: Decimal
    afwijking_uren: Decimal
    afwijking_percentage: Decimal
    afwijking_dagen: Decimal
    afwijking_machine_kosten: Decimal
    afwijking_machine_kosten_percentage: Decimal
    status: DeviationStatus
    afwijkingen_per_scope: List[ScopeAfwijkingV1]
    werkelijke_uren_per_scope: Dict[str, Decimal]
    afwijkingen_per_scope_map: Dict[str, Decimal]
    insights: List[InsightV1]
    aantal_registraties: int
    aantal_medewerkers: int


# -----------------------------
# Leerfeedback
# -----------------------------


class NacalculatieDataPointV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    project_id: str
    project_naam: str = ""
    afwijkingen_per_scope: Dict[str, Decimal]
    geplande_uren_per_scope: Dict[str, Decimal]


class LeerfeedbackInputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nacalculaties: List[NacalculatieDataPointV1]


class ActiviteitSuggestieV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    activiteit: str
    huidige_waarde: Decimal
    gesuggereerde_waarde: Decimal
    wijziging_percentage: Decimal
    eenheid: str


class ScopeSuggestieV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    scope: str
    activiteiten: List[ActiviteitSuggestieV1]
    gemiddelde_afwijking: Decimal
    gemiddelde_afwijking_percentage: Decimal
    aantal_projecten: int
    betrouwbaarheid: Betrouwbaarheid
    bron_projecten: List[str]
    reden: str
    type: Literal["onderschatting", "overschatting"]
    prioriteit: Literal["hoog", "gemiddeld", "laag"]
    waarschuwingen: List[str] = Field(default_factory=list)


class LeerfeedbackOutputV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    suggesties: List[ScopeSuggestieV1]
    totaal_geanalyseerde_projecten: int
    scopes_met_voldoende_data: int
    scopes_zonder_suggestie: List[str]


# -----------------------------
# Planning mutaties
# -----------------------------


class TaakStatusUpdateV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: TaakStatus


class TaakVolgordeV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # taak_id -> nieuwe volgorde
    volgorde: Dict[str, int]


class TaakToevoegenV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scope: str = Field(min_length=1)
    taak_naam: str = Field(min_length=1)
    norm_uren: condecimal(ge=0)  # type: ignore
    geschatte_dagen: condecimal(ge=0)  # type: ignore
