"""Fire-and-forget installation of dependencies and editor extensions."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, List, Sequence

from .logging import get_logger
from .models import WriteResult


class Installer:
    """Starts install processes without waiting for them to finish.

    Spawned processes are detached: their exit status is never collected and
    a spawn that fails is only logged.
    """

    def __init__(
        self,
        editor: str,
        *,
        package_manager: str = "npm",
        spawner: Callable[..., object] | None = None,
    ) -> None:
        self.editor = editor
        self.package_manager = package_manager
        self._spawn = spawner or self._default_spawner
        self.logger = get_logger("installer")

    def run(self, root: str | Path, result: WriteResult) -> List[List[str]]:
        """Spawn every requested install and return the commands that started."""
        cwd = Path(root)
        commands: List[List[str]] = []
        if result.install_types:
            commands.append([self.package_manager, "install"])
        for extension in result.extensions:
            commands.append([self.editor, "--install-extension", extension])

        started: List[List[str]] = []
        for command in commands:
            if self._start(command, cwd):
                started.append(command)
        return started

    def _start(self, command: Sequence[str], cwd: Path) -> bool:
        self.logger.info("Running %s", " ".join(command))
        try:
            self._spawn(list(command), cwd=cwd)
        except OSError as exc:
            self.logger.warning("Could not start %s: %s", command[0], exc)
            return False
        return True

    @staticmethod
    def _default_spawner(args: Sequence[str], *, cwd: Path) -> subprocess.Popen:
        return subprocess.Popen(list(args), cwd=str(cwd))


__all__ = ["Installer"]
