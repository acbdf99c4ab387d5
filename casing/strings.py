"""Canonical string handling for word segmentation.

Normalization here is lossy on purpose: it exists to make word boundaries
and identifiers stable, never to preserve the input for display.
"""

from __future__ import annotations

import unicodedata


def _is_mark(ch: str) -> bool:
    # Mn, Mc and Me.
    return unicodedata.category(ch).startswith("M")


def normalize_string(s: str | None) -> str:
    """Return the folded form used by the tokenizer.

    Rules:
      - ``None`` is treated as ``""``
      - leading/trailing whitespace is stripped
      - Unicode normalization: NFKD
      - combining marks (diacritics) are removed

    ``" crème brûlée "`` -> ``"creme brulee"``
    """

    if s is None:
        return ""
    s = s.strip()
    if not s:
        return s
    decomposed = unicodedata.normalize("NFKD", s)
    # Marks may have shielded whitespace from the first strip.
    return "".join(ch for ch in decomposed if not _is_mark(ch)).strip()
