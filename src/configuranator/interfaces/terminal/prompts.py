"""
Typed Prompt Engine
====================

"Ask until valid" over an injectable line source.

Interactive runs read from the terminal through click and never give up on the
operator. Tests hand the engine a ScriptedInput and, optionally, an attempt
limit, so every loop is guaranteed to end: either a value is accepted, the
script runs dry (InputExhaustedError) or the limit is hit
(PromptAttemptsExceededError).
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Protocol, TypeVar

import click

from configuranator.core.exceptions import (
    ConfiguratorError,
    InputExhaustedError,
    ParseError,
    PromptAttemptsExceededError,
    ValidationError,
)
from configuranator.core.structured_logger import get_logger
from configuranator.interfaces.terminal.parsers import SCALAR_PARSERS, ScalarKind

logger = get_logger("Prompter")

T = TypeVar("T")


class InputSource(Protocol):
    """Anything that can answer a prompt with one line of text"""

    def read_line(self, label: str) -> str:
        ...


class ConsoleInput:
    """Reads answers from the terminal. EOF or Ctrl-C aborts through click."""

    def read_line(self, label: str) -> str:
        return click.prompt(label, default="", show_default=False, prompt_suffix="", type=str)


class ScriptedInput:
    """Answers prompts from a fixed list of lines, recording every label asked."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.prompts: list[str] = []

    def read_line(self, label: str) -> str:
        self.prompts.append(label)
        try:
            return next(self._lines)
        except StopIteration:
            raise InputExhaustedError(
                f"No scripted answer left for prompt {label.strip()!r}",
                details={'answered': len(self.prompts) - 1},
            ) from None


def invalid_scalar_message(kind: ScalarKind) -> str:
    return f"Invalid input. Please enter a valid {kind.value}."


class Prompter:
    """
    Prompt engine bound to one input source.

    Args:
        source: Where answers come from (terminal if omitted)
        echo: Output function with click.echo's signature
        max_attempts: Answers a single prompt may reject before giving up;
            None means keep asking
    """

    def __init__(
        self,
        source: InputSource | None = None,
        echo: Callable[..., Any] = click.echo,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.source = source if source is not None else ConsoleInput()
        self.echo = echo
        self.max_attempts = max_attempts

    def read(self, label: str) -> str:
        """Ask once and return the trimmed answer."""
        return self.source.read_line(label).strip()

    def ask(
        self,
        label: str,
        parse: Callable[[str], T],
        error_message: Callable[[ConfiguratorError], str] | None = None,
    ) -> T:
        """
        Keep asking ``label`` until ``parse`` accepts the answer.

        ``parse`` signals a bad answer by raising ParseError or
        ValidationError; the error is shown and the question repeated. Any
        other exception propagates.
        """
        attempts = 0
        while self.max_attempts is None or attempts < self.max_attempts:
            attempts += 1
            raw = self.read(label)
            try:
                return parse(raw)
            except (ParseError, ValidationError) as e:
                logger.debug("Answer rejected", prompt=label.strip(), attempt=attempts, error=e.to_dict())
                message = error_message(e) if error_message else f"Error: {e.message}"
                self.echo(message, err=True)

        logger.warning("Prompt gave up", prompt=label.strip(), attempts=attempts)
        raise PromptAttemptsExceededError(label, attempts)

    def prompt(self, label: str, kind: ScalarKind) -> Any:
        """Ask for one scalar of the given kind."""
        return self.ask(
            label,
            SCALAR_PARSERS[kind],
            error_message=lambda _e: invalid_scalar_message(kind),
        )

    def prompt_bool(self, label: str) -> bool:
        return self.prompt(label, ScalarKind.BOOLEAN)

    def prompt_int(self, label: str) -> int:
        return self.prompt(label, ScalarKind.INTEGER)

    def prompt_real(self, label: str) -> float:
        return self.prompt(label, ScalarKind.REAL)

    def prompt_ip(self, label: str) -> str:
        """Ask for an IP address and return it in canonical text form."""
        return str(self.prompt(label, ScalarKind.IP_ADDRESS))

    def prompt_str(self, label: str) -> str:
        return self.prompt(label, ScalarKind.STRING)
