"""Tests for shellext.prompts - rich-based interactive answer source."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from shellext.options.definitions import is_text
from shellext.prompts import ConsolePrompter, PromptCancelledError


def _prompter(answers: str) -> tuple[ConsolePrompter, StringIO]:
    """ConsolePrompter reading answers from a string, writing to a buffer."""
    output = StringIO()
    console = Console(file=output, width=200)
    return ConsolePrompter(console=console, stream=StringIO(answers)), output


class TestAsk:
    """Tests for ConsolePrompter.ask()."""

    def test_returns_trimmed_answer(self) -> None:
        prompter, _ = _prompter("   hello world  \n")
        assert prompter.ask("Name") == "hello world"

    def test_empty_answer_returns_default(self) -> None:
        prompter, output = _prompter("\n")
        assert prompter.ask("License", default="MIT") == "MIT"
        assert "(MIT)" in output.getvalue()

    def test_empty_default_accepted(self) -> None:
        prompter, _ = _prompter("  \n")
        assert prompter.ask("Homepage", default="") == ""

    def test_reasks_until_valid(self) -> None:
        prompter, output = _prompter("\n!!!\nMy Project\n")
        answer = prompter.ask(
            "Project name",
            validate=is_text,
            error="Project name cannot be empty.",
        )
        assert answer == "My Project"
        assert output.getvalue().count("Project name cannot be empty.") == 2

    def test_end_of_input_cancels(self) -> None:
        prompter, _ = _prompter("\n")
        with pytest.raises(PromptCancelledError):
            prompter.ask("UUID", validate=is_text)

    def test_question_shown(self) -> None:
        prompter, output = _prompter("x\n")
        prompter.ask("Target directory")
        assert "Target directory" in output.getvalue()


class TestConfirm:
    """Tests for ConsolePrompter.confirm()."""

    @pytest.mark.parametrize(
        ("answer", "expected"),
        [("y\n", True), ("YES\n", True), ("n\n", False), (" No \n", False)],
    )
    def test_accepts_yes_and_no(self, answer: str, expected: bool) -> None:
        prompter, _ = _prompter(answer)
        assert prompter.confirm("Add ESlint?") is expected

    @pytest.mark.parametrize("default", [True, False])
    def test_empty_answer_returns_default(self, default: bool) -> None:
        prompter, _ = _prompter("\n")
        assert prompter.confirm("Add Prettier?", default=default) is default

    def test_reasks_on_other_input(self) -> None:
        prompter, output = _prompter("maybe\ny\n")
        assert prompter.confirm("Add preferences?") is True
        assert 'Please enter "y" or "n".' in output.getvalue()

    def test_end_of_input_cancels(self) -> None:
        prompter, _ = _prompter("")
        with pytest.raises(PromptCancelledError):
            prompter.confirm("Add translations?")


class TestHint:
    """Tests for ConsolePrompter.hint()."""

    def test_prints_text_verbatim(self) -> None:
        prompter, output = _prompter("")
        prompter.hint("Enter a [SPDX] License Identifier")
        assert "Enter a [SPDX] License Identifier" in output.getvalue()
