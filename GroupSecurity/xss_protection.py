"""
XSS PROTECTION
==============
HTML escaping for user-supplied text before it is stored or displayed.
"""

# FLOW:
# - escape_html() replaces the five markup characters with entities.
# - sanitize_text() is the entry point used for free-form descriptions.
# WHY:
# - Mitigates script injection through group metadata.
# HOW:
# - Single regex pass with a fixed entity map.

from __future__ import annotations

import re
from typing import Any


_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}

_HTML_SPECIAL_RE = re.compile(r"[&<>\"']")


def escape_html(text: Any) -> str:
    """Escape & < > " ' as HTML entities. Non-string or empty input gives ""."""
    if not text or not isinstance(text, str):
        return ""
    return _HTML_SPECIAL_RE.sub(lambda m: _HTML_ENTITIES[m.group(0)], text)


def sanitize_text(text: Any) -> str:
    """Escape text meant for multi-line fields.

    Line breaks are left as-is; display code is expected to preserve them
    (e.g. with CSS white-space) rather than receiving <br> tags.
    """
    return escape_html(text)
