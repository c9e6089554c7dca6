"""Name transforms used when filling templates."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[ _-]")


def _words(name: str) -> list[str]:
    return [word for word in (part.strip() for part in _SEPARATOR_RE.split(name)) if word]


def to_kebab_case(name: str) -> str:
    """'My Cool_extension' -> 'my-cool-extension'."""
    return "-".join(_words(name)).lower()


def to_pascal_case(name: str) -> str:
    """'my cool-extension' -> 'MyCoolExtension'.

    Every word is capitalized and the rest of it lowercased, so
    'myEXT' becomes 'Myext'.
    """
    return "".join(word[0].upper() + word[1:].lower() for word in _words(name))
