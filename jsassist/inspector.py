"""Project inspection: config files, package.json and installed extensions."""

from __future__ import annotations

import copy
import json
import subprocess
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Dict, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from .config import AssistConfig
from .logging import get_logger
from .models import Context, DependencySets

JSCONFIG = "jsconfig.json"
TSCONFIG = "tsconfig.json"
PACKAGE_JSON = "package.json"

TYPES_PREFIX = "@types/"
DEPENDENCY_GROUPS = ("dependencies", "devDependencies", "optionalDependencies")


class InspectionError(RuntimeError):
    """Raised when a project file exists but cannot be parsed."""


def types_name_for(dependency: str) -> str:
    """Return the DefinitelyTyped package name for a dependency.

    Scoped packages are flattened the way DefinitelyTyped publishes them:
    ``@babel/core`` becomes ``@types/babel__core``.
    """
    if dependency.startswith("@") and "/" in dependency:
        scope, name = dependency[1:].split("/", 1)
        return f"{TYPES_PREFIX}{scope}__{name}"
    return f"{TYPES_PREFIX}{dependency}"


def iter_dependency_names(package_json: Mapping[str, Any] | None) -> Iterator[str]:
    """Yield dependency names in manifest order, each name once."""
    if not package_json:
        return
    seen: Set[str] = set()
    for group in DEPENDENCY_GROUPS:
        entries = package_json.get(group)
        if not isinstance(entries, Mapping):
            continue
        for name in entries:
            if name not in seen:
                seen.add(name)
                yield name


def classify_dependencies(package_json: Mapping[str, Any] | None) -> DependencySets:
    """Split every dependency group into runtime names and type-definition names."""
    runtime: Set[str] = set()
    types: Set[str] = set()
    for name in iter_dependency_names(package_json):
        if name.startswith(TYPES_PREFIX):
            types.add(name)
        else:
            runtime.add(name)
    return DependencySets(runtime=frozenset(runtime), types=frozenset(types))


def build_pending_package_json(
    package_json: Mapping[str, Any] | None,
    dependencies: DependencySets,
    *,
    ignore: Iterable[str] = (),
) -> Tuple[Optional[Dict[str, Any]], List[str]]:
    """Return a copy of package.json with missing @types entries added.

    The copy is only made once a dependency without types is found; when every
    runtime dependency is covered, ``(None, [])`` is returned.
    """
    if not package_json:
        return None, []
    ignored = set(ignore)
    pending: Optional[Dict[str, Any]] = None
    missing: List[str] = []
    for name in iter_dependency_names(package_json):
        if name not in dependencies.runtime or name in ignored:
            continue
        types_name = types_name_for(name)
        if types_name in dependencies.types:
            continue
        if pending is None:
            pending = copy.deepcopy(dict(package_json))
            optional = pending.get("optionalDependencies")
            pending["optionalDependencies"] = dict(optional) if isinstance(optional, Mapping) else {}
        pending["optionalDependencies"][types_name] = "*"
        missing.append(types_name)
    return pending, missing


class Inspector:
    """Builds the run context for a project directory."""

    def __init__(
        self,
        editor: str,
        *,
        config: AssistConfig | None = None,
        runner: Callable[..., str] | None = None,
    ) -> None:
        self.editor = editor
        self.config = config
        self._runner = runner or self._default_runner
        self.logger = get_logger("inspector")

    def inspect(self, path: str | Path) -> Context:
        root = Path(path).expanduser().resolve()
        js_config = read_json(root / JSCONFIG)
        ts_config = read_json(root / TSCONFIG)
        options = ts_config.get("compilerOptions") if ts_config is not None else None
        if options is not None and not isinstance(options, dict):
            raise InspectionError(f"{TSCONFIG} compilerOptions must be a JSON object")
        package_json = read_json(root / PACKAGE_JSON)
        self.logger.debug(
            "Found jsconfig=%s tsconfig=%s package.json=%s",
            js_config is not None,
            ts_config is not None,
            package_json is not None,
        )

        dependencies = classify_dependencies(package_json)
        ignore = self.config.types.ignore if self.config else ()
        pending, missing = build_pending_package_json(package_json, dependencies, ignore=ignore)
        if missing:
            self.logger.debug("Missing type definitions: %s", ", ".join(missing))

        return Context(
            root=str(root),
            js_config=js_config,
            ts_config=ts_config,
            package_json=package_json,
            installed_extensions=self.list_extensions(root),
            dependencies=dependencies,
            pending_package_json=pending,
            missing_types=missing,
        )

    def list_extensions(self, cwd: Path) -> Optional[FrozenSet[str]]:
        """Return installed editor extensions, or None when the editor cannot be queried."""
        try:
            output = self._runner([self.editor, "--list-extensions"], cwd=cwd, capture_output=True)
        except (OSError, subprocess.SubprocessError, UnicodeDecodeError) as exc:
            self.logger.debug("Could not list extensions with %s: %s", self.editor, exc)
            return None
        lines = (line.strip() for line in output.strip().splitlines())
        return frozenset(line for line in lines if line)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        if capture_output:
            return completed.stdout
        return ""


def read_json(path: Path) -> Optional[Dict[str, Any]]:
    """Return the parsed JSON object at ``path`` or None when the file is missing."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InspectionError(f"Failed to parse {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise InspectionError(f"{path.name} must contain a JSON object")
    return data


__all__ = [
    "Inspector",
    "InspectionError",
    "build_pending_package_json",
    "classify_dependencies",
    "iter_dependency_names",
    "read_json",
    "types_name_for",
]
