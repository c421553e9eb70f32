"""REST API for one-shot completions.

``POST /api/generate`` takes ``{"userText": "..."}`` and answers with
``{"completion": "..."}``, or ``{"error": "..."}`` on failure.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ghost.ai.complete import CompletionFn
from ghost.ai.types import ErrorResponse, GenerateRequest, GenerateResponse


logger = logging.getLogger(__name__)

NO_TEXT_ERROR = "No text provided"
UNKNOWN_ERROR = "An unknown error occurred"


def create_generate_router(completion_fn: CompletionFn) -> APIRouter:
    router = APIRouter(prefix="/api", tags=["generate"])

    @router.post("/generate")
    async def generate(request: Request) -> JSONResponse:
        try:
            body = GenerateRequest.model_validate(await request.json())
        except (ValueError, ValidationError):
            body = GenerateRequest()

        if not body.user_text:
            return JSONResponse(status_code=400, content=ErrorResponse(error=NO_TEXT_ERROR).model_dump())

        try:
            completion = await completion_fn(body.user_text, None)
        except Exception as e:
            logger.exception("Error generating completion")
            return JSONResponse(
                status_code=500,
                content=ErrorResponse(error=str(e) or UNKNOWN_ERROR).model_dump(),
            )

        return JSONResponse(content=GenerateResponse(completion=completion).model_dump())

    return router
