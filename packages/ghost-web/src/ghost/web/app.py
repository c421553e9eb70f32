"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI, WebSocket
from fastapi.staticfiles import StaticFiles

from ghost.ai.complete import CompletionFn, create_completion_fn
from ghost.ai.models import resolve_model
from ghost.core.settings import load_settings
from ghost.web.config import Config
from ghost.web.ws.handler import websocket_handler

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None, completion_fn: CompletionFn | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without ``completion_fn`` the configured provider/model is resolved from
    the model registry; an unknown model raises ``ValueError`` here rather
    than on the first request.
    """
    config = config or Config()
    settings = load_settings(config.settings_path)

    if completion_fn is None:
        model = resolve_model(config.provider, config.model_id)
        completion_fn = create_completion_fn(model)
        model_label = f"{model.provider}/{model.id}"
    else:
        model_label = "custom"

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> Any:
        logger.info("Completions via %s", model_label)
        logger.info(
            "Debounce %.0f ms, progressive reveal %d steps over %.0f ms",
            settings.coordinator.debounce_seconds * 1000,
            settings.acceptance.progressive_steps,
            settings.acceptance.progressive_duration_seconds * 1000,
        )
        yield
        logger.info("Server shutting down")

    app = FastAPI(title="ghost-web", lifespan=lifespan)

    # --- WebSocket endpoint ---

    @app.websocket("/ws")
    async def ws_endpoint(websocket: WebSocket) -> None:
        await websocket_handler(websocket, completion_fn, settings)

    # --- REST API endpoints ---

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    from ghost.web.api.generate import create_generate_router
    from ghost.web.api.models_api import create_models_router

    app.include_router(create_generate_router(completion_fn))
    app.include_router(create_models_router(config.provider, config.model_id))

    # --- Static files (must be last) ---

    static_dir = Path(config.static_dir)
    if static_dir.exists():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    return app
