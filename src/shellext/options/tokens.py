"""Command-line tokenizer.

Splits raw arguments into option and positional tokens while keeping their
arrival order, which decides the winner when both '--flag' and '--no-flag'
are given.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

TokenKind = Literal["option", "positional"]


@dataclass(frozen=True)
class RawToken:
    """A single command-line token.

    Attributes:
        kind: 'option' for '--name[=value]' style arguments, 'positional'
            for everything else.
        name: Option name without leading dashes, or None for positionals.
        value: The '=value' part of an option, the argument itself for
            positionals, or None for a bare option.
        raw: The argument exactly as given.
    """

    kind: TokenKind
    name: str | None
    value: str | None
    raw: str


def tokenize(args: Sequence[str]) -> list[RawToken]:
    """Turn raw arguments into tokens.

    String options take their value only in the '--name=value' form, so
    '--uuid foo' yields a bare 'uuid' option followed by the positional
    'foo'. Everything after a lone '--' is positional.
    """
    tokens: list[RawToken] = []
    options_ended = False

    for arg in args:
        if options_ended or arg == "-" or not arg.startswith("-"):
            tokens.append(RawToken(kind="positional", name=None, value=arg, raw=arg))
            continue

        if arg == "--":
            options_ended = True
            continue

        body = arg[2:] if arg.startswith("--") else arg[1:]
        name, sep, value = body.partition("=")
        tokens.append(
            RawToken(
                kind="option",
                name=name,
                value=value if sep else None,
                raw=arg,
            )
        )

    return tokens
