from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.sync import router as sync_router
from src.domain.exceptions import ConfigurationError, SyncError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Settings are read per request, so a .env loaded at startup is enough.
    load_dotenv()
    yield


app = FastAPI(title="sAIS", lifespan=lifespan)
app.include_router(sync_router)


@app.exception_handler(SyncError)
async def sync_error_handler(request: Request, exc: SyncError) -> JSONResponse:
    """A failed run is reported with the error class so callers can tell
    misconfiguration apart from upstream trouble."""

    logging.getLogger("uvicorn.error").warning(
        "Sync failed: %s", exc, extra={"path": str(request.url.path)}
    )
    status_code = 500 if isinstance(exc, ConfigurationError) else 502
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": exc.__class__.__name__},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("SAIS_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
