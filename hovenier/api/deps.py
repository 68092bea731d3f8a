from __future__ import annotations

import time
from functools import lru_cache
from typing import Optional

from fastapi import Request

from hovenier.config import get_settings
from hovenier.core.logging_config import logger
from hovenier.reference.loader import get_reference_data
from hovenier.store.memory import InMemoryStore

DEFAULT_OWNER = "default"


@lru_cache
def get_store() -> InMemoryStore:
    """Eén gedeelde store per proces; tests overschrijven dit via dependency_overrides."""
    settings = get_settings()
    return InMemoryStore(get_reference_data(settings.reference_dir))


def elapsed_ms(t0: float) -> float:
    return round((time.time() - t0) * 1000, 2)


def log_obs(
    *,
    request: Request,
    endpoint: str,
    duration_ms: float,
    result: str,
    event: str,
    status_code: Optional[int] = None,
    **fields: object,
) -> None:
    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID", "unknown")

    bound = logger.bind(
        request_id=request_id,
        endpoint=endpoint,
        duration_ms=duration_ms,
        result=result,
        **fields,
    )
    if status_code is not None:
        bound = bound.bind(status_code=status_code)

    bound.info(event)
