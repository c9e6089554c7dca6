"""Tests for shellext.options.tokens - command-line tokenizer."""

from __future__ import annotations

from shellext.options.tokens import RawToken, tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_bare_option_has_no_value(self) -> None:
        """'--use-prefs' yields an option token without value."""
        assert tokenize(["--use-prefs"]) == [
            RawToken(kind="option", name="use-prefs", value=None, raw="--use-prefs")
        ]

    def test_option_with_value(self) -> None:
        """'--uuid=a@b' splits name and value at the first '='."""
        (token,) = tokenize(["--uuid=a@b=c"])
        assert token.name == "uuid"
        assert token.value == "a@b=c"

    def test_option_with_empty_value(self) -> None:
        """'--license=' keeps the empty string, distinct from a bare option."""
        (token,) = tokenize(["--license="])
        assert token.value == ""

    def test_negated_option_keeps_prefix(self) -> None:
        """'--no-use-eslint' is tokenized verbatim; negation happens later."""
        (token,) = tokenize(["--no-use-eslint"])
        assert token.kind == "option"
        assert token.name == "no-use-eslint"

    def test_positionals_keep_order(self) -> None:
        """Positional arguments are returned in arrival order between options."""
        tokens = tokenize(["first", "--use-prefs", "second"])
        assert [t.kind for t in tokens] == ["positional", "option", "positional"]
        assert tokens[0].value == "first"
        assert tokens[2].value == "second"

    def test_space_separated_value_is_positional(self) -> None:
        """String options need '=': '--uuid foo' is a bare option plus a positional."""
        tokens = tokenize(["--uuid", "foo"])
        assert tokens[0].name == "uuid"
        assert tokens[0].value is None
        assert tokens[1].kind == "positional"

    def test_double_dash_ends_options(self) -> None:
        """Everything after '--' is positional."""
        tokens = tokenize(["--", "--use-prefs"])
        assert tokens == [
            RawToken(kind="positional", name=None, value="--use-prefs", raw="--use-prefs")
        ]

    def test_single_dash_is_positional(self) -> None:
        """A lone '-' is a positional argument."""
        assert tokenize(["-"])[0].kind == "positional"

    def test_short_option_is_option(self) -> None:
        """'-x' is an option token named 'x' (later reported as unknown)."""
        (token,) = tokenize(["-x"])
        assert token.kind == "option"
        assert token.name == "x"
