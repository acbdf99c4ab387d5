"""Case styles.

Every public ``to_*`` function tokenizes its input once and hands the words to
a pure renderer. All of them are total: ``None``, ``""`` and separator-only
input render as ``""``.

Examples (``"hello world 123"``):

  ================== ===================
  to_pascal          HelloWorld123
  to_camel           helloWorld123
  to_kebab           hello-world-123
  to_snake           hello_world_123
  to_screaming_snake HELLO_WORLD_123
  to_title_case      Hello World 123
  ================== ===================
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Sequence

from .graphemes import reverse
from .words import capitalize, is_acronym, tokenize

# Kept lowercase in Title Case unless first or last.
MINOR_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "for", "nor", "as", "at", "by",
        "in", "of", "on", "per", "to", "vs", "via", "from", "over", "into",
        "onto", "up", "down", "off",
    }
)


def render_pascal(words: Sequence[str]) -> str:
    return "".join(capitalize(w) for w in words)


def render_camel(words: Sequence[str]) -> str:
    if not words:
        return ""
    return words[0].lower() + "".join(capitalize(w) for w in words[1:])


def render_kebab(words: Sequence[str]) -> str:
    return "-".join(w.lower() for w in words)


def render_snake(words: Sequence[str]) -> str:
    return "_".join(w.lower() for w in words)


def render_screaming_snake(words: Sequence[str]) -> str:
    return "_".join(w.upper() for w in words)


def render_title(words: Sequence[str]) -> str:
    """Title Case with acronyms kept verbatim and minor words lowercased.

    ``["the", "lord", "of", "the", "rings"]`` -> ``"The Lord of the Rings"``
    """

    last = len(words) - 1
    out: List[str] = []
    for i, w in enumerate(words):
        if is_acronym(w):
            out.append(w)
        elif 0 < i < last and w.lower() in MINOR_WORDS:
            out.append(w.lower())
        else:
            out.append(capitalize(w))
    return " ".join(out)


def to_pascal(text: str | None) -> str:
    """``"hello_world"`` -> ``"HelloWorld"``; ``"HTTPServer2FA"`` -> ``"HTTPServer2FA"``"""
    return render_pascal(tokenize(text))


def to_camel(text: str | None) -> str:
    """``"HelloWorld"`` -> ``"helloWorld"``; ``"HTTPServer2FA"`` -> ``"httpServer2FA"``"""
    return render_camel(tokenize(text))


def to_kebab(text: str | None) -> str:
    """``"  hello__world--ID42Parser  "`` -> ``"hello-world-id-42-parser"``"""
    return render_kebab(tokenize(text))


def to_snake(text: str | None) -> str:
    """``"helloWorld"`` -> ``"hello_world"``"""
    return render_snake(tokenize(text))


def to_screaming_snake(text: str | None) -> str:
    """``"hello-world"`` -> ``"HELLO_WORLD"``"""
    return render_screaming_snake(tokenize(text))


def to_title_case(text: str | None) -> str:
    """``"a tale of two cities"`` -> ``"A Tale of Two Cities"``"""
    return render_title(tokenize(text))


class RenamingType(Enum):
    PASCAL_CASE = "pascal"
    CAMEL_CASE = "camel"
    SNAKE_CASE = "snake"
    KEBAB_CASE = "kebab"
    SCREAMING_SNAKE_CASE = "screaming-snake"
    REVERSE_NAME = "reverse"
    TITLE_CASE = "title"

    @property
    def slug(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Menu label, e.g. ``"Rename to PASCAL CASE"``."""
        return "Rename to " + self.name.replace("_", " ")

    @classmethod
    def parse(cls, value: "RenamingType | str") -> "RenamingType":
        """Accept a member, a slug (``"screaming-snake"``) or a member name."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"expected renaming type, got {type(value).__name__}")
        key = value.strip()
        for kind in cls:
            if key.lower() == kind.value or key.upper().replace("-", "_") == kind.name:
                return kind
        choices = ", ".join(k.value for k in cls)
        raise ValueError(f"unknown renaming type: {value!r} (expected one of: {choices})")


_RENDERERS: Dict[RenamingType, Callable[[Sequence[str]], str]] = {
    RenamingType.PASCAL_CASE: render_pascal,
    RenamingType.CAMEL_CASE: render_camel,
    RenamingType.SNAKE_CASE: render_snake,
    RenamingType.KEBAB_CASE: render_kebab,
    RenamingType.SCREAMING_SNAKE_CASE: render_screaming_snake,
    RenamingType.TITLE_CASE: render_title,
}


def convert(text: str | None, kind: "RenamingType | str") -> str:
    """Apply one renaming type to ``text``.

    Reversal works on the literal text; every other type tokenizes once.
    """

    kind = RenamingType.parse(kind)
    if kind is RenamingType.REVERSE_NAME:
        return reverse(text)
    return _RENDERERS[kind](tokenize(text))
