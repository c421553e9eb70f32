"""REST API for the completion models the server can be pointed at."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from ghost.ai import get_models, get_providers


def create_models_router(provider: str, model_id: str) -> APIRouter:
    router = APIRouter(prefix="/api/models", tags=["models"])

    @router.get("")
    async def list_models() -> dict[str, Any]:
        return {
            "active": {"provider": provider, "modelId": model_id},
            "providers": [
                {"name": name, "models": [m.model_dump(by_alias=True) for m in get_models(name)]}
                for name in get_providers()
            ],
        }

    return router
