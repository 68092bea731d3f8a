from __future__ import annotations

import time
from dataclasses import asdict
from io import BytesIO
from typing import Dict, List
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse

from hovenier.config import CalculationConfig
from hovenier.engine.offerte import calculate_offerte
from hovenier.engine.quote_aggregator import OfferteBerekening
from hovenier.explain.breakdown_builder import BreakdownBuilder, build_scope_breakdown
from hovenier.export.excel_export import export_offerte_to_excel
from hovenier.schemas.offerte_v1 import (
    NoteV1,
    OfferteCalculateInputV1,
    OfferteOutputV1,
    OfferteRegelV1,
    OfferteTotalenV1,
)
from hovenier.store.memory import InMemoryStore

from .deps import DEFAULT_OWNER, elapsed_ms, get_store, log_obs

# ----------------------------
# Router
# ----------------------------
router = APIRouter(prefix="/api/offertes", tags=["hovenier", "offerte"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


# ----------------------------
# Helpers
# ----------------------------
def _breakdown(berekening: OfferteBerekening) -> Dict[str, List[str]]:
    builder = BreakdownBuilder()
    out: Dict[str, List[str]] = {}
    for result in berekening.results:
        if result.is_empty:
            continue
        out.setdefault(result.scope.value, []).extend(builder.build(build_scope_breakdown(result)))
    return out


def _to_output(offerte_id: str, berekening: OfferteBerekening) -> OfferteOutputV1:
    return OfferteOutputV1(
        offerte_id=offerte_id,
        regels=[OfferteRegelV1(**r.to_dict()) for r in berekening.regels],
        totalen=OfferteTotalenV1(**berekening.totalen.to_dict()),
        uren_per_scope=berekening.uren_per_scope,
        notes=[NoteV1(**asdict(n)) for n in berekening.notes],
        breakdown=_breakdown(berekening),
    )


def _calculate(payload: OfferteCalculateInputV1, store: InMemoryStore) -> OfferteBerekening:
    config = CalculationConfig.from_settings(
        uurtarief=payload.uurtarief,
        marge_percentage=payload.marge_percentage,
        btw_percentage=payload.btw_percentage,
    )
    reference = store.reference_for(DEFAULT_OWNER)
    if payload.correctiefactoren:
        reference = reference.with_factor_overrides(payload.correctiefactoren)

    return calculate_offerte(
        payload.scopes,
        reference,
        config=config,
        bereikbaarheid=payload.bereikbaarheid,
        achterstalligheid=payload.achterstalligheid,
        complexiteit=payload.complexiteit,
        scope_marges=payload.scope_marges,
        include_overhead=payload.include_overhead,
        garantiepakket=payload.garantiepakket.model_dump() if payload.garantiepakket else None,
        strict=payload.strict,
    )


# ----------------------------
# 1) Calculate
# ----------------------------
@router.post("/calculate", response_model=OfferteOutputV1)
def calculate(
    payload: OfferteCalculateInputV1,
    request: Request,
    store: InMemoryStore = Depends(get_store),
) -> OfferteOutputV1:
    t0 = time.time()

    berekening = _calculate(payload, store)
    offerte_id = payload.offerte_id or f"offerte_{uuid4().hex[:12]}"
    store.save_offerte(offerte_id, berekening)
    if payload.project_id:
        store.link_offerte(payload.project_id, offerte_id)

    log_obs(
        request=request,
        endpoint="/api/offertes/calculate",
        duration_ms=elapsed_ms(t0),
        result="warning" if berekening.notes else "ok",
        event="offerte_calculate",
        status_code=200,
        offerte_id=offerte_id,
        scope_count=len(payload.scopes),
        regel_count=len(berekening.regels),
    )
    return _to_output(offerte_id, berekening)


# ----------------------------
# 2) Ophalen
# ----------------------------
@router.get("/{offerte_id}", response_model=OfferteOutputV1)
def get_offerte(offerte_id: str, store: InMemoryStore = Depends(get_store)) -> OfferteOutputV1:
    berekening = store.get_offerte(offerte_id)
    if berekening is None:
        raise HTTPException(status_code=404, detail="Offerte not found.")
    return _to_output(offerte_id, berekening)


# ----------------------------
# 3) Export XLSX
# ----------------------------
@router.get("/{offerte_id}/export/xlsx")
def export_xlsx(
    offerte_id: str,
    request: Request,
    store: InMemoryStore = Depends(get_store),
) -> StreamingResponse:
    t0 = time.time()

    berekening = store.get_offerte(offerte_id)
    if berekening is None:
        log_obs(
            request=request,
            endpoint="/api/offertes/export/xlsx",
            duration_ms=elapsed_ms(t0),
            result="not_found",
            event="offerte_export_xlsx",
            status_code=404,
            offerte_id=offerte_id,
        )
        raise HTTPException(status_code=404, detail="Offerte not found.")

    content = export_offerte_to_excel(berekening, offerte_id=offerte_id, breakdown=_breakdown(berekening))

    log_obs(
        request=request,
        endpoint="/api/offertes/export/xlsx",
        duration_ms=elapsed_ms(t0),
        result="ok",
        event="offerte_export_xlsx",
        status_code=200,
        offerte_id=offerte_id,
    )
    return StreamingResponse(
        BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{offerte_id}.xlsx"'},
    )
