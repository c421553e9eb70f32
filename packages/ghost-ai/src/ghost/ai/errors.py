"""Provider failure type.

Cancellation is never reported through this type: a superseded request
surfaces as ``asyncio.CancelledError``.
"""

from __future__ import annotations


class ProviderError(RuntimeError):
    """A completion provider failed (network, HTTP status, or provider-side error)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
