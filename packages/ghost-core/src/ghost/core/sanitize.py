"""Outbound text sanitization.

Removes what would corrupt a JSON/UTF-8 request body without touching visible
content. Idempotent: ``sanitize_text(sanitize_text(x)) == sanitize_text(x)``.
"""

from __future__ import annotations

import re

_SURROGATE_RE = re.compile(r"[\ud800-\udfff]")
# C0 and C1 controls except \t and \n (\r is folded into \n first)
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_text(text: str) -> str:
    text = _SURROGATE_RE.sub("\ufffd", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _CONTROL_RE.sub("", text)
    return text.strip()
