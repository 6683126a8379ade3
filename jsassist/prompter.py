"""Console confirmation prompts."""

from __future__ import annotations

import sys
from typing import Callable, Protocol, TextIO

_YES = {"y", "yes"}
_NO = {"n", "no"}


class PromptAborted(RuntimeError):
    """Raised when the user closes input before answering."""


class Prompter(Protocol):
    def confirm(self, message: str, default: bool = True) -> bool:
        ...


class ConsolePrompter:
    """Asks yes/no questions on the terminal."""

    def __init__(
        self,
        reader: Callable[[str], str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self._read = reader or input
        self._stream = stream or sys.stdout

    def confirm(self, message: str, default: bool = True) -> bool:
        hint = "Y/n" if default else "y/N"
        while True:
            try:
                reply = self._read(f"? {message} ({hint}) ")
            except EOFError as exc:
                raise PromptAborted("Input closed before the question was answered") from exc
            answer = reply.strip().lower()
            if not answer:
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._stream.write("Please answer 'y' or 'n'.\n")


__all__ = ["ConsolePrompter", "PromptAborted", "Prompter"]
