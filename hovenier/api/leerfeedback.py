from __future__ import annotations

import time
from dataclasses import asdict

from fastapi import APIRouter, Depends, Request

from hovenier.nacalculatie.leerfeedback import (
    NacalculatieDataPoint,
    analyze_nacalculaties,
    get_suggestion_priority,
    validate_suggestion,
)
from hovenier.schemas.project_v1 import LeerfeedbackInputV1, LeerfeedbackOutputV1, ScopeSuggestieV1
from hovenier.store.memory import InMemoryStore

from .deps import DEFAULT_OWNER, elapsed_ms, get_store, log_obs

router = APIRouter(prefix="/api/leerfeedback", tags=["hovenier", "leerfeedback"])


@router.post("/analyse", response_model=LeerfeedbackOutputV1)
def analyse(
    payload: LeerfeedbackInputV1,
    request: Request,
    store: InMemoryStore = Depends(get_store),
) -> LeerfeedbackOutputV1:
    """Alleen voorstellen; normuren worden hier nooit aangepast."""
    t0 = time.time()

    points = [NacalculatieDataPoint(**p.model_dump()) for p in payload.nacalculaties]
    analyse = analyze_nacalculaties(points, store.reference_for(DEFAULT_OWNER).normuren)

    suggesties = [
        ScopeSuggestieV1(
            **asdict(s),
            prioriteit=get_suggestion_priority(s),
            waarschuwingen=validate_suggestion(s),
        )
        for s in analyse.suggesties
    ]

    log_obs(
        request=request,
        endpoint="/api/leerfeedback/analyse",
        duration_ms=elapsed_ms(t0),
        result="ok",
        event="leerfeedback_analyse",
        status_code=200,
        project_count=analyse.totaal_geanalyseerde_projecten,
        suggestie_count=len(suggesties),
    )
    return LeerfeedbackOutputV1(
        suggesties=suggesties,
        totaal_geanalyseerde_projecten=analyse.totaal_geanalyseerde_projecten,
        scopes_met_voldoende_data=analyse.scopes_met_voldoende_data,
        scopes_zonder_suggestie=analyse.scopes_zonder_suggestie,
    )
