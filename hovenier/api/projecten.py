from __future__ import annotations

import time
from dataclasses import asdict
from io import BytesIO
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse

from hovenier.config import CalculationConfig
from hovenier.export.excel_export import export_nacalculatie_to_excel
from hovenier.nacalculatie.deviation import DeviationThresholds, calculate_nacalculatie
from hovenier.nacalculatie.models import MachineGebruik, NacalculatieResult, UrenRegistratie
from hovenier.planning.sizer import (
    PlanningTaak,
    TaskNotFoundError,
    add_task,
    reorder_tasks,
    size_planning,
    sorted_tasks,
    summarize_tasks,
    update_task_status,
)
from hovenier.planning.voorcalculatie import VoorcalculatieData, duration_with_buffer, voorcalculatie_for_offerte
from hovenier.schemas.project_v1 import (
    MachineGebruikV1,
    NacalculatieOutputV1,
    PlanningOutputV1,
    PlanningSummaryV1,
    PlanningTaakV1,
    TaakStatusUpdateV1,
    TaakToevoegenV1,
    TaakVolgordeV1,
    UrenRegistratieV1,
    VoorcalculatieInputV1,
    VoorcalculatieOutputV1,
)
from hovenier.store.memory import InMemoryStore

from .deps import elapsed_ms, get_store, log_obs
from .offertes import XLSX_MEDIA_TYPE

router = APIRouter(prefix="/api/projecten", tags=["hovenier", "project"])


# ----------------------------
# Helpers
# ----------------------------
def _require_voorcalculatie(store: InMemoryStore, project_id: str) -> VoorcalculatieData:
    data = store.get_voorcalculatie(project_id)
    if data is None:
        raise HTTPException(status_code=404, detail="Voorcalculatie not found.")
    return data


def _planning_output(project_id: str, taken: List[PlanningTaak]) -> PlanningOutputV1:
    summary = summarize_tasks(taken)
    return PlanningOutputV1(
        project_id=project_id,
        totaal_dagen=summary.totaal_dagen,
        taken=[PlanningTaakV1(**asdict(t)) for t in sorted_tasks(taken)],
        summary=PlanningSummaryV1(**asdict(summary)),
    )


def _nacalculatie(store: InMemoryStore, project_id: str) -> NacalculatieResult:
    voorcalc = _require_voorcalculatie(store, project_id)

    offerte_id = store.offerte_for_project(project_id)
    berekening = store.get_offerte(offerte_id) if offerte_id else None
    thresholds = DeviationThresholds.from_config(CalculationConfig.from_settings())

    result = calculate_nacalculatie(
        voorcalc,
        store.uren(project_id),
        store.machines(project_id),
        offerte_regels=berekening.regels if berekening else None,
        thresholds=thresholds,
    )
    store.save_nacalculatie(project_id, result)
    return result


# ----------------------------
# 1) Voorcalculatie
# ----------------------------
@router.post("/{project_id}/voorcalculatie", response_model=VoorcalculatieOutputV1)
def create_voorcalculatie(
    project_id: str,
    payload: VoorcalculatieInputV1,
    request: Request,
    store: InMemoryStore = Depends(get_store),
) -> VoorcalculatieOutputV1:
    t0 = time.time()

    berekening = store.get_offerte(payload.offerte_id)
    if berekening is None:
        raise HTTPException(status_code=404, detail="Offerte not found.")

    config = CalculationConfig.from_settings(
        team_grootte=payload.team_grootte,
        effectieve_uren_per_dag=payload.effectieve_uren_per_dag,
        buffer_percentage=payload.buffer_percentage,
    )
    data = voorcalculatie_for_offerte(berekening, config)
    store.save_voorcalculatie(project_id, data)
    store.link_offerte(project_id, payload.offerte_id)

    log_obs(
        request=request,
        endpoint="/api/projecten/voorcalculatie",
        duration_ms=elapsed_ms(t0),
        result="ok",
        event="voorcalculatie_create",
        status_code=200,
        project_id=project_id,
        norm_uren=str(data.norm_uren_totaal),
    )
    return VoorcalculatieOutputV1(
        project_id=project_id,
        offerte_id=payload.offerte_id,
        dagen_met_buffer=duration_with_buffer(data.geschatte_dagen, config.buffer_percentage),
        **asdict(data),
    )


# ----------------------------
# 2) Planning
# ----------------------------
@router.post("/{project_id}/planning", response_model=PlanningOutputV1)
def generate_planning(
    project_id: str,
    request: Request,
    store: InMemoryStore = Depends(get_store),
) -> PlanningOutputV1:
    t0 = time.time()

    data = _require_voorcalculatie(store, project_id)
    planning = size_planning(data.norm_uren_per_scope, data.team_grootte, data.effectieve_uren_per_dag)
    store.save_planning(project_id, planning.taken)

    log_obs(
        request=request,
        endpoint="/api/projecten/planning",
        duration_ms=elapsed_ms(t0),
        result="ok",
        event="planning_generate",
        status_code=200,
        project_id=project_id,
        taak_count=len(planning.taken),
    )
    return _planning_output(project_id, planning.taken)


@router.get("/{project_id}/planning", response_model=PlanningOutputV1)
def get_planning(project_id: str, store: InMemoryStore = Depends(get_store)) -> PlanningOutputV1:
    return _planning_output(project_id, store.get_planning(project_id))


@router.patch("/{project_id}/planning/{taak_id}", response_model=PlanningOutputV1)
def set_task_status(
    project_id: str,
    taak_id: str,
    payload: TaakStatusUpdateV1,
    store: InMemoryStore = Depends(get_store),
) -> PlanningOutputV1:
    try:
        taken = update_task_status(store.get_planning(project_id), taak_id, payload.status)
    except TaskNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    store.save_planning(project_id, taken)
    return _planning_output(project_id, taken)


@router.put("/{project_id}/planning/volgorde", response_model=PlanningOutputV1)
def set_task_order(
    project_id: str,
    payload: TaakVolgordeV1,
    store: InMemoryStore = Depends(get_store),
) -> PlanningOutputV1:
    taken = reorder_tasks(store.get_planning(project_id), payload.volgorde)
    store.save_planning(project_id, taken)
    return _planning_output(project_id, taken)


@router.post("/{project_id}/planning/taken", response_model=PlanningOutputV1)
def append_task(
    project_id: str,
    payload: TaakToevoegenV1,
    store: InMemoryStore = Depends(get_store),
) -> PlanningOutputV1:
    taken = add_task(
        store.get_planning(project_id),
        scope=payload.scope,
        taak_naam=payload.taak_naam,
        norm_uren=payload.norm_uren,
        geschatte_dagen=payload.geschatte_dagen,
    )
    store.save_planning(project_id, taken)
    return _planning_output(project_id, taken)


# ----------------------------
# 3) Logs (append-only)
# ----------------------------
@router.post("/{project_id}/uren", status_code=201)
def register_uren(
    project_id: str,
    payload: UrenRegistratieV1,
    store: InMemoryStore = Depends(get_store),
) -> dict:
    store.append_uren(project_id, UrenRegistratie(**payload.model_dump()))
    return {"status": "ok", "aantal_registraties": len(store.uren(project_id))}


@router.post("/{project_id}/machinegebruik", status_code=201)
def register_machinegebruik(
    project_id: str,
    payload: MachineGebruikV1,
    store: InMemoryStore = Depends(get_store),
) -> dict:
    store.append_machine(project_id, MachineGebruik(**payload.model_dump()))
    return {"status": "ok", "aantal_registraties": len(store.machines(project_id))}


# ----------------------------
# 4) Nacalculatie
# ----------------------------
@router.get("/{project_id}/nacalculatie", response_model=NacalculatieOutputV1)
def get_nacalculatie(
    project_id: str,
    request: Request,
    store: InMemoryStore = Depends(get_store),
) -> NacalculatieOutputV1:
    t0 = time.time()

    result = _nacalculatie(store, project_id)

    log_obs(
        request=request,
        endpoint="/api/projecten/nacalculatie",
        duration_ms=elapsed_ms(t0),
        result=result.status.value,
        event="nacalculatie_calculate",
        status_code=200,
        project_id=project_id,
        registraties=result.aantal_registraties,
    )
    return NacalculatieOutputV1(project_id=project_id, **asdict(result))


@router.get("/{project_id}/nacalculatie/export/xlsx")
def export_nacalculatie_xlsx(project_id: str, store: InMemoryStore = Depends(get_store)) -> StreamingResponse:
    result = _nacalculatie(store, project_id)
    content = export_nacalculatie_to_excel(result, project_id=project_id)
    return StreamingResponse(
        BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="nacalculatie_{project_id}.xlsx"'},
    )
