"""Word segmentation and acronym policy.

A word is a maximal run of letters and decimal digits. Runs are further split
at case and letter/digit transitions:

  - non-upper -> UPPER           ``parseXML``   -> ``parse XML``
  - ACRONYM -> Word              ``HTTPServer`` -> ``HTTP Server``
  - letter <-> digit             ``ID42Parser`` -> ``ID 42 Parser``

Letters without case (``Lo`` such as CJK, ``Lm``) start a new word before any
cased letter: ``字符mixed`` -> ``字符 mixed``, ``测试Mixed`` -> ``测试 Mixed``.
A cased letter followed by an uncased one does not split (``Tokyo日本``).
"""

from __future__ import annotations

import unicodedata
from typing import List

from .strings import normalize_string

# Acronyms up to this length survive capitalization verbatim (ID, XML, HTTP).
MAX_PRESERVED_ACRONYM = 4

_UPPER = 0
_LOWER = 1
_LETTER = 2
_DIGIT = 3
_OTHER = 4


def _char_class(ch: str) -> int:
    cat = unicodedata.category(ch)
    if cat == "Lu":
        return _UPPER
    if cat == "Ll":
        return _LOWER
    if cat[0] == "L":
        return _LETTER
    if cat == "Nd":
        return _DIGIT
    return _OTHER


def _starts_word(prev: int, cur: int, nxt: int) -> bool:
    # prev and cur are both alphanumeric here.
    if cur == _UPPER:
        if prev != _UPPER:
            return True
        return nxt == _LOWER
    if cur == _DIGIT:
        return prev != _DIGIT
    if cur == _LOWER:
        return prev == _DIGIT or prev == _LETTER
    return prev == _DIGIT


def split_words(normalized: str) -> List[str]:
    """Split already-normalized text into words, in order of appearance.

    Separators (anything that is not a letter or a decimal digit) are dropped.
    """

    classes = [_char_class(ch) for ch in normalized]
    words: List[str] = []
    start = -1

    for i, cls in enumerate(classes):
        if cls == _OTHER:
            if start >= 0:
                words.append(normalized[start:i])
                start = -1
            continue
        if start < 0:
            start = i
            continue
        nxt = classes[i + 1] if i + 1 < len(classes) else _OTHER
        if _starts_word(classes[i - 1], cls, nxt):
            words.append(normalized[start:i])
            start = i

    if start >= 0:
        words.append(normalized[start:])
    return words


def tokenize(text: str | None) -> List[str]:
    """Normalize ``text`` and split it into words.

    ``"hello__world--ID42Parser"`` -> ``["hello", "world", "ID", "42", "Parser"]``
    """

    return split_words(normalize_string(text))


def is_acronym(word: str) -> bool:
    """True iff ``word`` has at least two letters and all of them are uppercase.

    Digits are ignored: ``"2FA"`` is an acronym, ``"A1"`` is not (one letter).
    """

    letters = 0
    for ch in word:
        cat = unicodedata.category(ch)
        if cat[0] != "L":
            continue
        if cat != "Lu":
            return False
        letters += 1
    return letters >= 2


def _title_char(ch: str) -> str:
    t = ch.title()
    # Single code point mapping only; "ß".title() would give "Ss".
    return t if len(t) == 1 else ch


def capitalize(word: str) -> str:
    """Upper-case the first character and lower-case the rest.

    Short acronyms (see ``MAX_PRESERVED_ACRONYM``) are returned unchanged:
    ``"hello"`` -> ``"Hello"``, ``"XML"`` -> ``"XML"``, ``"HTTPS2"`` -> ``"Https2"``.
    """

    if not word:
        return ""
    if is_acronym(word) and len(word) <= MAX_PRESERVED_ACRONYM:
        return word
    lower = word.lower()
    return _title_char(lower[0]) + lower[1:]
