import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from protolab.api.v1.api import router
from protolab.core.config import KNOWN_LOG_LEVELS, settings, validate_settings

logging.basicConfig(
    level=settings.LOG_LEVEL if settings.LOG_LEVEL in KNOWN_LOG_LEVELS else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: check configuration once and keep the result for /health."""
    config_errors = validate_settings(settings)
    for error in config_errors:
        logger.warning("Configuration problem in %s: %s", error.field, error.message)
    app.state.config_errors = config_errors
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)


# ── Global Exception Handler (ensures 500s return JSON through CORS) ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# ── Middleware ────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────

app.include_router(router, prefix=settings.API_V1_STR)


# ── Health / Root ─────────────────────────────────────────────

@app.get("/")
def read_root():
    return {"message": "Welcome to the ProtoLab API"}


@app.get("/health")
def health(request: Request):
    errors = getattr(request.app.state, "config_errors", None)
    if errors is None:
        errors = validate_settings(settings)
    return {
        "status": "degraded" if errors else "healthy",
        "provider": settings.ai_provider_name,
        "config_errors": [{"field": e.field, "message": e.message} for e in errors],
    }
