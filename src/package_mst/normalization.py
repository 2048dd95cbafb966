"""Package code normalization helpers."""

from __future__ import annotations

import ftfy


def normalize_code(code: str) -> str:
    """Return `code` with mis-encoded text repaired and outer whitespace removed.

    Case and inner characters are kept, so lookups stay exact-key.
    """

    raw = str(code or "")
    if not raw.strip():
        return ""
    return ftfy.fix_text(raw).strip()
