"""Interactive selection prompts.

A Prompter presents an ordered list of options and blocks until the
operator picks one. Three implementations are provided:

- QuestionaryPrompter: arrow-key selection in a terminal
- StreamPrompter: reads the answer from a text stream (piped stdin)
- ScriptedPrompter: returns pre-seeded answers
"""

import sys
from collections.abc import Iterable, Sequence
from typing import Protocol, TextIO

import questionary
from icecream import ic
from prompt_toolkit.output import create_output

from kubectl_view_secret import console
from kubectl_view_secret.exceptions import PromptError
from kubectl_view_secret.styles import POINTER, PROMPT_STYLE, QMARK


class Prompter(Protocol):
    """Capability to ask the operator to pick one of several options."""

    def select(self, title: str, description: str, options: Sequence[str]) -> str:
        """Block until one of options is picked and return it.

        Options are presented in the given order.

        Raises:
            PromptError: If the input is closed or the selection is cancelled.

        """
        ...


class QuestionaryPrompter:
    """Terminal selection widget backed by questionary.

    The widget is drawn on stderr, leaving stdout to the decoded output.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output if output is not None else sys.stderr

    def select(self, title: str, description: str, options: Sequence[str]) -> str:
        console.info(description)
        try:
            answer = questionary.select(
                title,
                choices=list(options),
                style=PROMPT_STYLE,
                pointer=POINTER,
                qmark=QMARK,
                output=create_output(stdout=self._output),
            ).unsafe_ask()
        except (KeyboardInterrupt, EOFError) as err:
            raise PromptError("Selection cancelled") from err
        if answer is None:
            raise PromptError("Selection cancelled")
        return str(answer)


class StreamPrompter:
    """Reads selections line by line from a text stream.

    Each line may be an option verbatim or its 1-based position in the
    list. This is used when stdin is not a terminal.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def select(self, title: str, description: str, options: Sequence[str]) -> str:
        console.action(f"[bold]{title}[/bold]")
        console.info(description)
        for position, option in enumerate(options, start=1):
            console.step(f"{position}) {console.highlight(option)}")

        line = self._stream.readline()
        if not line:
            raise PromptError("Input closed before a selection was made")

        answer = line.strip()
        ic(answer)
        if answer in options:
            return answer
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        raise PromptError(f"Invalid selection '{answer}'")


class ScriptedPrompter:
    """Answers prompts from a fixed sequence of responses.

    Attributes:
        calls: The (title, description, options) of every prompt shown.

    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.calls: list[tuple[str, str, list[str]]] = []

    def select(self, title: str, description: str, options: Sequence[str]) -> str:
        self.calls.append((title, description, list(options)))
        try:
            answer = next(self._answers)
        except StopIteration:
            raise PromptError("No scripted answer left") from None
        if answer not in options:
            raise PromptError(f"Invalid selection '{answer}'")
        return answer
