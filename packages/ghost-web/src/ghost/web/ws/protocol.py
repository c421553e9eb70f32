"""WebSocket message protocol definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ghost.core.session import SessionState


# --- Client -> Server messages ---


@dataclass
class TextChangedMessage:
    type: str = "text_changed"
    text: str = ""


@dataclass
class AcceptInstantMessage:
    type: str = "accept_instant"


@dataclass
class AcceptProgressiveMessage:
    type: str = "accept_progressive"


@dataclass
class DismissMessage:
    type: str = "dismiss"


ClientMessage = TextChangedMessage | AcceptInstantMessage | AcceptProgressiveMessage | DismissMessage


def parse_client_message(data: Any) -> ClientMessage | None:
    """Parse a decoded JSON value into a typed client message.

    Returns ``None`` for anything that is not a known, well-formed message.
    """
    if not isinstance(data, dict):
        return None
    match data.get("type", ""):
        case "text_changed":
            text = data.get("text", "")
            if not isinstance(text, str):
                return None
            return TextChangedMessage(text=text)
        case "accept_instant":
            return AcceptInstantMessage()
        case "accept_progressive":
            return AcceptProgressiveMessage()
        case "dismiss":
            return DismissMessage()
        case _:
            return None


# --- Server -> Client message builders ---


def state_message(state: SessionState) -> dict[str, Any]:
    return {
        "type": "state",
        "text": state.text,
        "ghostText": state.ghost_text,
        "status": state.status,
        "revealing": state.revealing,
        "error": state.error,
    }


def error_message(message: str) -> dict[str, Any]:
    return {"type": "error", "message": message}
