"""Device Registration FastAPI application.

Serves the registration RPC surface over HTTP. The directory is built once
at import time and handed to the router explicitly.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from registration.api.routes import create_router
from registration.device.directory import RegistrationDirectory
from registration.device.repository import build_store
from registration.domain import registration
from registration.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which config overlay is applied:
#   - "test" / "development" → in-memory provider
#   - "production"           → PostgreSQL at DATABASE_URL, schema via manage.py
registration.init()

directory = RegistrationDirectory(build_store(registration))

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Device Registration API",
    description="Push-token directory: register, unregister and list devices",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Bind per-request logging context; log and re-raise unhandled failures."""
    clear_context()
    add_context(request_id=uuid4().hex, method=request.method, path=request.url.path)
    try:
        return await call_next(request)
    except Exception:
        logger.exception("request_failed")
        raise
    finally:
        clear_context()


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Domain validation failures (e.g. an oversized token) become 422s."""
    return JSONResponse(status_code=422, content={"detail": exc.messages})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(create_router(directory, registration))


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": registration.name})
