"""Pipeline orchestration: inspect, ask, write, install."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .config import AssistConfig, load_config
from .inspector import Inspector
from .installer import Installer
from .logging import get_logger
from .models import Answers, Context
from .prompter import ConsolePrompter, Prompter
from .questions import ask
from .writer import ProjectWriter

WELCOME = "Welcome to the JavaScript project assistant!"


@dataclass
class RunOutcome:
    """Result of a single assistant run."""

    context: Context
    answers: Answers
    written: List[str] = field(default_factory=list)
    spawned: List[List[str]] = field(default_factory=list)


class Assistant:
    """Coordinates one run over a project directory."""

    def __init__(
        self,
        editor: str | None = None,
        *,
        config: AssistConfig | None = None,
        prompter: Prompter | None = None,
        inspector: Inspector | None = None,
        writer: ProjectWriter | None = None,
        installer: Installer | None = None,
    ) -> None:
        self._editor_override = editor
        self._config = config
        self.prompter = prompter or ConsolePrompter()
        self._inspector = inspector
        self._writer = writer
        self._installer = installer
        self.logger = get_logger("assistant")

    def run(self, path: str | Path = ".") -> RunOutcome:
        project = Path(path).expanduser().resolve()
        self.logger.info(WELCOME)

        config = self._config or load_config(project)
        editor = config.resolve_editor(self._editor_override)
        self.logger.debug("Using editor binary %s", editor)

        inspector = self._inspector or Inspector(editor, config=config)
        context = inspector.inspect(project)
        if context.missing_types:
            self.logger.info("%d dependencies have no type definitions", len(context.missing_types))

        answers = ask(context, self.prompter)

        writer = self._writer or ProjectWriter(config)
        result = writer.apply(context, answers)

        installer = self._installer or Installer(editor, package_manager=config.package_manager)
        spawned = installer.run(context.root, result)

        return RunOutcome(
            context=context,
            answers=answers,
            written=list(result.written),
            spawned=spawned,
        )


__all__ = ["Assistant", "RunOutcome", "WELCOME"]
