"""Interactive answer sources for the option resolver.

ConsolePrompter asks questions on the terminal through rich's Prompt and
Confirm, re-asking until an answer passes validation or the default is
accepted with an empty line.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, InvalidResponse, Prompt


class PromptCancelledError(Exception):
    """Raised when the operator closes the input or interrupts a prompt."""


class Prompter(ABC):
    """Source of interactive answers for options missing from the CLI."""

    @abstractmethod
    def ask(
        self,
        question: str,
        *,
        validate: Callable[[str], bool] | None = None,
        default: str | None = None,
        error: str = "Invalid input.",
    ) -> str:
        """Ask for a line of text.

        Args:
            question: Question shown to the operator.
            validate: Returns True for acceptable answers.
            default: Returned when the operator enters nothing. Without a
                default an empty answer has to pass validation.
            error: Message shown when an answer fails validation.

        Returns:
            The trimmed answer, or the default.

        Raises:
            PromptCancelledError: If no answer can be obtained.
        """

    @abstractmethod
    def confirm(self, question: str, *, default: bool = False) -> bool:
        """Ask a yes/no question."""

    def hint(self, text: str) -> None:
        """Show explanatory text before a question."""


class _TrimmedInputMixin:
    """Reads one trimmed line per call, raising EOFError at end of input."""

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: Any,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        if stream is None:
            return console.input(prompt, password=password).strip()
        console.print(prompt, end="")
        line = stream.readline()
        if not line:
            raise EOFError
        return line.strip()


class _ValidatedPrompt(_TrimmedInputMixin, Prompt):
    def __init__(
        self,
        prompt: str,
        *,
        console: Console,
        validate: Callable[[str], bool] | None,
        error: str,
    ) -> None:
        super().__init__(prompt, console=console)
        self.validate = validate
        self.error = error

    def process_response(self, value: str) -> str:
        if self.validate is not None and not self.validate(value):
            raise InvalidResponse(f"[prompt.invalid]{escape(self.error)}")
        return value


class _YesNoPrompt(_TrimmedInputMixin, Confirm):
    validate_error_message = '[prompt.invalid]Please enter "y" or "n".'

    def process_response(self, value: str) -> bool:
        answer = value.lower()
        if answer in ("y", "yes"):
            return True
        if answer in ("n", "no"):
            return False
        raise InvalidResponse(self.validate_error_message)


class ConsolePrompter(Prompter):
    """Prompter that talks to the operator through a rich Console.

    Args:
        console: Console used for questions and messages.
        stream: Read answers from this stream instead of the terminal.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or Console()
        self._stream = stream

    def ask(
        self,
        question: str,
        *,
        validate: Callable[[str], bool] | None = None,
        default: str | None = None,
        error: str = "Invalid input.",
    ) -> str:
        prompt = _ValidatedPrompt(
            f"[bold]{escape(question)}[/bold]",
            console=self.console,
            validate=validate,
            error=error,
        )
        return self._run(prompt, ... if default is None else default)

    def confirm(self, question: str, *, default: bool = False) -> bool:
        prompt = _YesNoPrompt(f"[bold]{escape(question)}[/bold]", console=self.console)
        return self._run(prompt, default)

    def hint(self, text: str) -> None:
        self.console.print(f"[dim]{escape(text)}[/dim]")

    def _run(self, prompt: Prompt | Confirm, default: Any) -> Any:
        try:
            return prompt(default=default, stream=self._stream)
        except EOFError as exc:
            raise PromptCancelledError("input closed before all questions were answered") from exc
        except KeyboardInterrupt as exc:
            raise PromptCancelledError("interrupted by the operator") from exc
