"""
Notes API: FastAPI Application Factory
========================================

What:  Creates and wires the FastAPI application.
How:   create_app() builds the app, owns a fresh NoteStore, adds middleware,
       mounts the request stages in order and installs the error chain.
Who:   uvicorn (`notes_api.main:app`), `python -m notes_api` and the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │  Middleware: RequestID → RequestLogging              │
    │                                                      │
    │  Request stages (in order):                          │
    │    /hello → /notes... → /error, /crash → catch-all   │
    │                                                      │
    │  Error chain (AppError, body-parse, router 404/405): │
    │    translate_body → translate_http → log → envelope  │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from notes_api import __version__
from notes_api.config import Settings, settings as default_settings
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import RequestIDMiddleware
from notes_api.pipeline import ErrorChain, mount_routes
from notes_api.routes import fallback, faults, hello, notes
from notes_api.store import NoteStore

logger = logging.getLogger(__name__)

# Real routes, in matching order. The not-found interceptor is mounted after these.
ROUTE_STAGES = (hello.router, notes.router, faults.router)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure the root logger once, at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access-log middleware already covers what uvicorn.access would print
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    app_settings: Settings = app.state.settings

    setup_logging(app_settings.log_level)
    logger.info("%s %s starting up...", app_settings.app_name, __version__)
    logger.info("Seeded note store with %d notes", len(app.state.note_store))
    logger.info(
        "Server running on http://%s:%d", app_settings.backend_host, app_settings.backend_port
    )

    yield

    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Override the environment-derived settings (used in tests).
        store:        Override the seeded NoteStore (used in tests).

    Returns:
        A fully wired FastAPI instance with its own NoteStore.
    """
    app_settings = app_settings or default_settings

    app = FastAPI(
        title=app_settings.app_name,
        description="In-memory notes API with a centralized JSON error handler.",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.note_store = store if store is not None else NoteStore()

    # ── Middleware ────────────────────────────────────────────────────────
    # Last added runs first: RequestID → RequestLogging → routes.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Request Stages, then Error Chain ──────────────────────────────────
    mount_routes(app, ROUTE_STAGES, interceptor=fallback.router)
    ErrorChain().install(app)

    return app


app = create_app()
