from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from hovenier.engine.quote_aggregator import OfferteBerekening
from hovenier.nacalculatie.models import MachineGebruik, NacalculatieResult, UrenRegistratie
from hovenier.planning.sizer import PlanningTaak
from hovenier.planning.voorcalculatie import VoorcalculatieData
from hovenier.reference.models import ReferenceData


@runtime_checkable
class ReferenceSource(Protocol):
    """Leestoegang tot normuren, correctiefactoren en prijsboek."""

    def reference_for(self, owner_id: str) -> ReferenceData: ...


@runtime_checkable
class ActualsLog(Protocol):
    """Append-only logs per project: alleen toevoegen en lezen, nooit wijzigen."""

    def append_uren(self, project_id: str, registratie: UrenRegistratie) -> None: ...
    def append_machine(self, project_id: str, gebruik: MachineGebruik) -> None: ...
    def uren(self, project_id: str) -> List[UrenRegistratie]: ...
    def machines(self, project_id: str) -> List[MachineGebruik]: ...


@runtime_checkable
class ResultStore(Protocol):
    """Schrijftoegang voor berekende resultaten."""

    def save_offerte(self, offerte_id: str, berekening: OfferteBerekening) -> None: ...
    def get_offerte(self, offerte_id: str) -> Optional[OfferteBerekening]: ...
    def save_voorcalculatie(self, project_id: str, data: VoorcalculatieData) -> None: ...
    def get_voorcalculatie(self, project_id: str) -> Optional[VoorcalculatieData]: ...
    def save_planning(self, project_id: str, taken: List[PlanningTaak]) -> None: ...
    def get_planning(self, project_id: str) -> List[PlanningTaak]: ...
    def link_offerte(self, project_id: str, offerte_id: str) -> None: ...
    def offerte_for_project(self, project_id: str) -> Optional[str]: ...
    def save_nacalculatie(self, project_id: str, result: NacalculatieResult) -> None: ...
    def get_nacalculatie(self, project_id: str) -> Optional[NacalculatieResult]: ...
