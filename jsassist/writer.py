"""Applies confirmed answers to the project files."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Mapping

from jinja2 import Environment, FileSystemLoader

from .config import AssistConfig
from .inspector import JSCONFIG, PACKAGE_JSON, TSCONFIG
from .logging import get_logger
from .models import Answers, Context, WriteResult
from .questions import (
    ACQUIRE_TYPES,
    CREATE_JSCONFIG,
    ESLINT_EXTENSION,
    INSTALL_ESLINT,
    INSTALL_NPM_SCRIPT_RUNNER,
    NPM_SCRIPT_EXTENSION,
    allow_js_confirmed,
)

ESLINTRC = ".eslintrc"
JSCONFIG_TEMPLATE = "jsconfig.json.j2"
ESLINTRC_TEMPLATE = "eslintrc.json.j2"
DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates")


class ProjectWriter:
    """Writes jsconfig, tsconfig, package.json and .eslintrc as answered."""

    def __init__(self, config: AssistConfig | None = None) -> None:
        self.config = config
        templates_dir = config.templates_dir if config else None
        self._env = self._create_env(templates_dir)
        self.logger = get_logger("writer")

    def apply(self, context: Context, answers: Answers) -> WriteResult:
        root = Path(context.root)
        result = WriteResult()

        if answers.get(CREATE_JSCONFIG):
            jsconfig = self.config.jsconfig if self.config else None
            self._render(
                JSCONFIG_TEMPLATE,
                root / JSCONFIG,
                target=jsconfig.target if jsconfig else "ES6",
                module=jsconfig.module if jsconfig else "commonjs",
            )
            result.written.append(JSCONFIG)
        elif allow_js_confirmed(answers) and context.ts_config is not None:
            write_json(root / TSCONFIG, enable_allow_js(context.ts_config))
            result.written.append(TSCONFIG)

        if answers.get(ACQUIRE_TYPES) and context.pending_package_json is not None:
            write_json(root / PACKAGE_JSON, context.pending_package_json)
            result.written.append(PACKAGE_JSON)
            result.install_types = True

        if answers.get(INSTALL_NPM_SCRIPT_RUNNER):
            result.extensions.append(NPM_SCRIPT_EXTENSION)

        if answers.get(INSTALL_ESLINT):
            self._render(ESLINTRC_TEMPLATE, root / ESLINTRC)
            result.written.append(ESLINTRC)
            result.extensions.append(ESLINT_EXTENSION)

        for name in result.written:
            self.logger.info("Wrote %s", name)
        return result

    def _render(self, template_name: str, destination: Path, **values: Any) -> None:
        template = self._env.get_template(template_name)
        destination.write_text(template.render(**values), encoding="utf-8")

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


def enable_allow_js(ts_config: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of tsconfig with compilerOptions.allowJs set, keeping other options."""
    updated = copy.deepcopy(dict(ts_config))
    options = updated.get("compilerOptions")
    if not isinstance(options, dict):
        options = {}
        updated["compilerOptions"] = options
    options["allowJs"] = True
    return updated


def write_json(path: Path, data: Mapping[str, Any]) -> None:
    """Overwrite ``path`` with ``data`` as 4-space indented JSON."""
    path.write_text(json.dumps(data, indent=4, ensure_ascii=False), encoding="utf-8")


__all__ = ["ESLINTRC", "ProjectWriter", "enable_allow_js", "write_json"]
