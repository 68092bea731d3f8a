# hovenier/main.py
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hovenier import __version__
from hovenier.api import leerfeedback_router, offertes_router, projecten_router
from hovenier.core.logging_config import logger, setup_logging
from hovenier.domain.errors import HovenierError, ScopeValidationError

# ----------------------------------------------------
# App init
# ----------------------------------------------------
app = FastAPI(title="Hovenier offerte-engine", version=__version__)

setup_logging()
logger.info("startup", service="hovenier-api")


# ----------------------------------------------------
# Health
# ----------------------------------------------------
@app.get("/health", include_in_schema=True)
def health() -> dict:
    return {"status": "ok"}


# ----------------------------------------------------
# Logging middleware
# ----------------------------------------------------
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()

    request_id = request.headers.get("X-Request-ID", "unknown")
    request.state.request_id = request_id

    bound_logger = logger.bind(
        request_id=request_id,
        endpoint=str(request.url.path),
        method=request.method,
    )

    bound_logger.info("request_started")
    response = await call_next(request)
    latency_ms = round((time.time() - start) * 1000, 2)

    bound_logger.bind(status_code=response.status_code, latency_ms=latency_ms).info("request_finished")
    return response


# ----------------------------------------------------
# Errors
# ----------------------------------------------------
@app.exception_handler(ScopeValidationError)
def scope_validation_handler(request: Request, exc: ScopeValidationError):
    return JSONResponse(
        status_code=422,
        content={"code": exc.code, "detail": exc.message, "errors": exc.errors},
    )


@app.exception_handler(HovenierError)
def hovenier_error_handler(request: Request, exc: HovenierError):
    logger.bind(code=exc.code, endpoint=str(request.url.path)).warning("engine_error")
    return JSONResponse(status_code=400, content={"code": exc.code, "detail": exc.message})


# ----------------------------------------------------
# Routers
# ----------------------------------------------------
app.include_router(offertes_router)
app.include_router(projecten_router)
app.include_router(leerfeedback_router)
