"""Headless editing surface: the owner of the editable text."""

from __future__ import annotations


class TextSurface:
    """Editable text with a cursor and a focus flag.

    The presentation layer mirrors this state; accept paths write to it and
    restore focus with the cursor at the end of the text.
    """

    def __init__(self, text: str = "") -> None:
        self._text: str = text
        self._cursor: int = len(text)

        # Focusable interface
        self.focused: bool = False

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def set_text(self, text: str) -> None:
        """Replace the text and move the cursor to its end."""
        self._text = text
        self._cursor = len(text)

    def focus(self) -> None:
        """Focus the surface with the cursor at the end of the text."""
        self.focused = True
        self._cursor = len(self._text)

    def blur(self) -> None:
        self.focused = False
