"""Core data models shared across the assistant stages."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Optional

Answers = Dict[str, bool]


@dataclass(frozen=True)
class DependencySets:
    """Runtime and type-definition dependency names found in package.json."""

    runtime: FrozenSet[str] = frozenset()
    types: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class Context:
    """Facts gathered once by the inspector and read by every later stage."""

    root: str
    js_config: Optional[Mapping[str, Any]] = None
    ts_config: Optional[Mapping[str, Any]] = None
    package_json: Optional[Mapping[str, Any]] = None
    installed_extensions: Optional[FrozenSet[str]] = None
    dependencies: DependencySets = field(default_factory=DependencySets)
    pending_package_json: Optional[Mapping[str, Any]] = None
    missing_types: List[str] = field(default_factory=list)

    @property
    def allows_js(self) -> bool:
        """True when tsconfig.json already sets compilerOptions.allowJs."""
        if self.ts_config is None:
            return False
        options = self.ts_config.get("compilerOptions")
        return isinstance(options, Mapping) and bool(options.get("allowJs"))


@dataclass(frozen=True)
class Question:
    """A yes/no confirmation offered only while its predicate holds."""

    id: str
    prompt: str
    is_applicable: Callable[[Context, Answers], bool]


@dataclass
class WriteResult:
    """Files written by the executor and the installs it requests."""

    written: List[str] = field(default_factory=list)
    install_types: bool = False
    extensions: List[str] = field(default_factory=list)
