from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, List, Optional

from hovenier.engine.quote_aggregator import OfferteBerekening
from hovenier.nacalculatie.models import MachineGebruik, NacalculatieResult, UrenRegistratie
from hovenier.planning.sizer import PlanningTaak
from hovenier.planning.voorcalculatie import VoorcalculatieData
from hovenier.reference.models import ReferenceData

logger = logging.getLogger(__name__)


class InMemoryStore:
    """
    Eenvoudige store voor API en tests. Implementeert ReferenceSource,
    ActualsLog en ResultStore. Logs zijn append-only; opgevraagde lijsten zijn kopieën.
    """

    def __init__(self, reference: ReferenceData):
        self._reference = reference
        self._lock = Lock()
        self._uren: Dict[str, List[UrenRegistratie]] = {}
        self._machines: Dict[str, List[MachineGebruik]] = {}
        self._offertes: Dict[str, OfferteBerekening] = {}
        self._voorcalculaties: Dict[str, VoorcalculatieData] = {}
        self._planning: Dict[str, List[PlanningTaak]] = {}
        self._project_offerte: Dict[str, str] = {}
        self._nacalculaties: Dict[str, NacalculatieResult] = {}

    # --- referentie ---

    def reference_for(self, owner_id: str) -> ReferenceData:
        return self._reference

    # --- logs ---

    def append_uren(self, project_id: str, registratie: UrenRegistratie) -> None:
        with self._lock:
            self._uren.setdefault(project_id, []).append(registratie)

    def append_machine(self, project_id: str, gebruik: MachineGebruik) -> None:
        with self._lock:
            self._machines.setdefault(project_id, []).append(gebruik)

    def uren(self, project_id: str) -> List[UrenRegistratie]:
        return list(self._uren.get(project_id, []))

    def machines(self, project_id: str) -> List[MachineGebruik]:
        return list(self._machines.get(project_id, []))

    # --- resultaten ---

    def save_offerte(self, offerte_id: str, berekening: OfferteBerekening) -> None:
        with self._lock:
            self._offertes[offerte_id] = berekening
        logger.debug("offerte stored: %s", offerte_id)

    def get_offerte(self, offerte_id: str) -> Optional[OfferteBerekening]:
        return self._offertes.get(offerte_id)

    def save_voorcalculatie(self, project_id: str, data: VoorcalculatieData) -> None:
        with self._lock:
            self._voorcalculaties[project_id] = data

    def get_voorcalculatie(self, project_id: str) -> Optional[VoorcalculatieData]:
        return self._voorcalculaties.get(project_id)

    def save_planning(self, project_id: str, taken: List[PlanningTaak]) -> None:
        with self._lock:
            # opnieuw genereren vervangt de vorige planning
            self._planning[project_id] = list(taken)

    def get_planning(self, project_id: str) -> List[PlanningTaak]:
        return list(self._planning.get(project_id, []))

    def link_offerte(self, project_id: str, offerte_id: str) -> None:
        with self._lock:
            self._project_offerte[project_id] = offerte_id

    def offerte_for_project(self, project_id: str) -> Optional[str]:
        return self._project_offerte.get(project_id)

    def save_nacalculatie(self, project_id: str, result: NacalculatieResult) -> None:
        # snapshot; kan altijd opnieuw berekend worden uit de logs
        with self._lock:
            self._nacalculaties[project_id] = result

    def get_nacalculatie(self, project_id: str) -> Optional[NacalculatieResult]:
        return self._nacalculaties.get(project_id)

