"""Main FastAPI server for the parley speech-to-speech translation API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from parley.state import RuntimeDeps
from parley.runtime.logging import configure_logging
from parley.runtime.dependencies import build_runtime_deps
from parley.handlers.http import SecurityHeadersMiddleware, router

logger = logging.getLogger(__name__)

configure_logging()


def create_app(runtime_deps: RuntimeDeps | None = None) -> FastAPI:
    """Build the app. Pass `runtime_deps` to skip environment-driven wiring."""

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        if getattr(app.state, "runtime_deps", None) is None:
            app.state.runtime_deps = await build_runtime_deps()
        logger.info("runtime: ready")
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.state.runtime_deps = runtime_deps
    app.add_middleware(SecurityHeadersMiddleware)
    app.include_router(router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
