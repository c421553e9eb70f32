"""HTTP client for a remote ``/api/generate`` completion endpoint."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from ghost.ai.complete import CancellationSignal, CompletionFn
from ghost.ai.errors import ProviderError
from ghost.ai.types import GenerateRequest

DEFAULT_ERROR = "Failed to fetch completion"


class GenerateClient:
    """POSTs the user's text to a completion endpoint and returns the completion.

    Any non-2xx response is a :class:`ProviderError`, whatever its payload looks
    like. No timeout is applied by default; callers abort superseded requests by
    cancelling the awaiting task.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        path: str = "/api/generate",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._path = path
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def generate(self, text: str) -> str:
        body = GenerateRequest(user_text=text).model_dump(by_alias=True)
        try:
            response = await self._client.post(self._path, json=body)
        except httpx.HTTPError as e:
            raise ProviderError(str(e) or DEFAULT_ERROR) from e

        payload = _json_or_none(response)

        if not response.is_success:
            message = payload.get("error") if isinstance(payload, dict) else None
            if not isinstance(message, str) or not message:
                message = DEFAULT_ERROR
            raise ProviderError(message, status_code=response.status_code)

        completion = payload.get("completion") if isinstance(payload, dict) else None
        if not isinstance(completion, str):
            raise ProviderError("Malformed completion response", status_code=response.status_code)
        return completion

    def as_completion_fn(self) -> CompletionFn:
        """Adapt :meth:`generate` to the ``(text, token) -> completion`` contract."""

        async def request_completion(text: str, token: CancellationSignal | None = None) -> str:
            if token is not None and token.cancelled:
                raise asyncio.CancelledError
            return await self.generate(text)

        return request_completion

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> GenerateClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None
