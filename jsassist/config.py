"""Configuration loading for jsassist (.jsassist.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".jsassist.yml"
DEFAULT_EDITOR = "code-insiders"
PACKAGE_MANAGERS = ("npm", "yarn", "pnpm")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class JsConfigOptions:
    """Values rendered into the jsconfig.json template."""

    target: str = "ES6"
    module: str = "commonjs"


@dataclass
class TypesConfig:
    """Type-definition lookup settings."""

    ignore: List[str] = field(default_factory=list)


@dataclass
class AssistConfig:
    """Represents the settings defined in .jsassist.yml."""

    root: Path
    editor: Optional[str] = None
    package_manager: str = "npm"
    templates_dir: Optional[Path] = None
    jsconfig: JsConfigOptions = field(default_factory=JsConfigOptions)
    types: TypesConfig = field(default_factory=TypesConfig)

    def resolve_editor(self, override: str | None = None) -> str:
        """Return the editor binary, preferring an explicit override."""
        return override or self.editor or DEFAULT_EDITOR


def load_config(config_path: Path) -> AssistConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AssistConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    package_manager = _as_str(data.get("package_manager")) or "npm"
    if package_manager not in PACKAGE_MANAGERS:
        allowed = ", ".join(PACKAGE_MANAGERS)
        raise ConfigError(f"Unsupported package_manager '{package_manager}' (expected one of {allowed})")

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    jsconfig = JsConfigOptions()
    jsconfig_data = _as_dict(data.get("jsconfig"))
    if jsconfig_data:
        jsconfig.target = _as_str(jsconfig_data.get("target")) or jsconfig.target
        jsconfig.module = _as_str(jsconfig_data.get("module")) or jsconfig.module

    types = TypesConfig()
    types_data = _as_dict(data.get("types"))
    if types_data:
        types.ignore = _as_str_list(types_data.get("ignore"))

    return AssistConfig(
        root=root,
        editor=_as_str(data.get("editor")),
        package_manager=package_manager,
        templates_dir=templates_dir,
        jsconfig=jsconfig,
        types=types,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
