"""WebSocket endpoint handler."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.websockets import WebSocket, WebSocketDisconnect

from ghost.ai.complete import CompletionFn
from ghost.core.session import GhostSession
from ghost.core.settings import GhostSettings
from ghost.web.ws.protocol import (
    AcceptInstantMessage,
    AcceptProgressiveMessage,
    DismissMessage,
    TextChangedMessage,
    error_message,
    parse_client_message,
    state_message,
)

logger = logging.getLogger(__name__)


class MessageSender:
    """Sends queued messages in order from a single task.

    State changes fire from timers and request tasks; routing them through one
    queue keeps them ordered on the wire. After a failed send the sender stops
    and further messages are dropped.
    """

    def __init__(self, send: Callable[[dict[str, Any]], Awaitable[None]]) -> None:
        self._send = send
        self._queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def start(self) -> None:
        self._task = asyncio.ensure_future(self._run())

    def put(self, data: dict[str, Any]) -> None:
        if not self._stopped:
            self._queue.put_nowait(data)

    async def _run(self) -> None:
        while True:
            data = await self._queue.get()
            try:
                await self._send(data)
            except Exception:
                logger.debug("WebSocket send failed; stopping sender", exc_info=True)
                self._stop()
                return

    def _stop(self) -> None:
        self._stopped = True
        while not self._queue.empty():
            self._queue.get_nowait()

    async def aclose(self) -> None:
        self._stop()
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None


async def websocket_handler(
    websocket: WebSocket,
    completion_fn: CompletionFn,
    settings: GhostSettings,
) -> None:
    """Main WebSocket handler - one ghost-text session per client connection."""
    await websocket.accept()

    session = GhostSession(completion_fn, settings)

    sender = MessageSender(websocket.send_json)
    session.subscribe(lambda state: sender.put(state_message(state)))
    sender.start()
    sender.put(state_message(session.state))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                sender.put(error_message("Invalid JSON"))
                continue

            msg = parse_client_message(data)
            if msg is None:
                msg_type = data.get("type") if isinstance(data, dict) else None
                sender.put(error_message(f"Unknown message type: {msg_type}"))
                continue

            match msg:
                case TextChangedMessage():
                    session.on_text_changed(msg.text)

                case AcceptInstantMessage():
                    session.on_accept_instant()

                case AcceptProgressiveMessage():
                    session.on_accept_progressive()

                case DismissMessage():
                    session.on_dismiss()

    except WebSocketDisconnect:
        logger.info("WebSocket disconnected")
    except Exception:
        logger.exception("WebSocket error")
    finally:
        session.close()
        await sender.aclose()
