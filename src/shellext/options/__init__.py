"""shellext option table and command-line tokenizer."""

from shellext.options.definitions import (
    CONFLICTING_OPTIONS,
    OPTION_MAP,
    OPTIONS,
    OptionKind,
    OptionSpec,
    flag_names,
    get_option,
)
from shellext.options.tokens import RawToken, tokenize

__all__ = [
    "CONFLICTING_OPTIONS",
    "OPTIONS",
    "OPTION_MAP",
    "OptionKind",
    "OptionSpec",
    "RawToken",
    "flag_names",
    "get_option",
    "tokenize",
]
