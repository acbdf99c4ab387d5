from __future__ import annotations

from typing import List

import regex

# Extended grapheme cluster (Unicode default, locale independent).
_CLUSTER = regex.compile(r"\X")


def graphemes(s: str | None) -> List[str]:
    """Split ``s`` into user-perceived characters.

    ``"a\\u0301😀"`` -> ``["a\\u0301", "😀"]``
    """

    if not s:
        return []
    return _CLUSTER.findall(s)


def reverse(s: str | None) -> str:
    """Reverse ``s`` cluster by cluster.

    Works on the literal input: no trimming and no diacritic folding.
    """

    if not s:
        return ""
    return "".join(reversed(graphemes(s)))
