"""Tests for jsassist.writer."""

from __future__ import annotations

import json

from jsassist.config import AssistConfig, JsConfigOptions
from jsassist.models import Context
from jsassist.questions import (
    ACQUIRE_TYPES,
    CONFIRM_ALLOW_JS,
    CREATE_JSCONFIG,
    ESLINT_EXTENSION,
    INSTALL_ESLINT,
    INSTALL_NPM_SCRIPT_RUNNER,
    NPM_SCRIPT_EXTENSION,
    SET_ALLOW_JS,
)
from jsassist.writer import ProjectWriter, enable_allow_js


def test_enable_allow_js_preserves_existing_options() -> None:
    original = {"compilerOptions": {"strict": True, "target": "es2020"}, "include": ["src"]}

    updated = enable_allow_js(original)

    assert updated == {
        "compilerOptions": {"strict": True, "target": "es2020", "allowJs": True},
        "include": ["src"],
    }
    assert "allowJs" not in original["compilerOptions"]


def test_enable_allow_js_creates_compiler_options() -> None:
    assert enable_allow_js({"include": ["src"]}) == {
        "include": ["src"],
        "compilerOptions": {"allowJs": True},
    }


def test_create_jsconfig_renders_template(project_builder) -> None:
    context = Context(root=str(project_builder.path()))

    result = ProjectWriter().apply(context, {CREATE_JSCONFIG: True})

    assert result.written == ["jsconfig.json"]
    assert result.install_types is False
    assert result.extensions == []
    jsconfig = project_builder.read_json("jsconfig.json")
    assert jsconfig["compilerOptions"] == {"target": "ES6", "module": "commonjs"}
    assert sorted(p.name for p in project_builder.path().iterdir()) == ["jsconfig.json"]


def test_create_jsconfig_uses_configured_options(project_builder) -> None:
    config = AssistConfig(root=project_builder.path(), jsconfig=JsConfigOptions(target="ES2020", module="es2015"))
    context = Context(root=str(project_builder.path()))

    ProjectWriter(config).apply(context, {CREATE_JSCONFIG: True})

    jsconfig = project_builder.read_json("jsconfig.json")
    assert jsconfig["compilerOptions"] == {"target": "ES2020", "module": "es2015"}


def test_templates_dir_overrides_packaged_templates(project_builder, tmp_path) -> None:
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "jsconfig.json.j2").write_text('{"custom": "{{ target }}"}', encoding="utf-8")
    config = AssistConfig(root=project_builder.path(), templates_dir=templates)
    context = Context(root=str(project_builder.path()))

    ProjectWriter(config).apply(context, {CREATE_JSCONFIG: True})

    assert project_builder.read_json("jsconfig.json") == {"custom": "ES6"}


def test_allow_js_round_trip(project_builder) -> None:
    ts_config = {"compilerOptions": {"strict": True, "outDir": "dist"}}
    project_builder.write_json("tsconfig.json", ts_config)
    context = Context(root=str(project_builder.path()), ts_config=ts_config)

    result = ProjectWriter().apply(context, {SET_ALLOW_JS: True})

    assert result.written == ["tsconfig.json"]
    text = (project_builder.path() / "tsconfig.json").read_text(encoding="utf-8")
    assert text == json.dumps(
        {"compilerOptions": {"strict": True, "outDir": "dist", "allowJs": True}}, indent=4
    )
    assert context.ts_config == {"compilerOptions": {"strict": True, "outDir": "dist"}}


def test_confirming_reask_writes_same_tsconfig(project_builder) -> None:
    context = Context(root=str(project_builder.path()), ts_config={})

    result = ProjectWriter().apply(context, {SET_ALLOW_JS: False, CONFIRM_ALLOW_JS: True})

    assert result.written == ["tsconfig.json"]
    assert project_builder.read_json("tsconfig.json") == {"compilerOptions": {"allowJs": True}}


def test_declined_allow_js_leaves_tsconfig_untouched(project_builder) -> None:
    project_builder.write({"tsconfig.json": "{}"})
    context = Context(root=str(project_builder.path()), ts_config={})

    result = ProjectWriter().apply(context, {SET_ALLOW_JS: False, CONFIRM_ALLOW_JS: False})

    assert result.written == []
    assert (project_builder.path() / "tsconfig.json").read_text(encoding="utf-8") == "{}"


def test_acquire_types_rewrites_package_json(project_builder) -> None:
    pending = {
        "dependencies": {"left-pad": "1.0.0"},
        "optionalDependencies": {"@types/left-pad": "*"},
    }
    context = Context(root=str(project_builder.path()), js_config={}, pending_package_json=pending)

    result = ProjectWriter().apply(context, {ACQUIRE_TYPES: True})

    assert result.written == ["package.json"]
    assert result.install_types is True
    text = (project_builder.path() / "package.json").read_text(encoding="utf-8")
    assert text == json.dumps(pending, indent=4)


def test_extensions_requested_and_eslintrc_written(project_builder) -> None:
    context = Context(root=str(project_builder.path()), js_config={})

    result = ProjectWriter().apply(
        context, {INSTALL_NPM_SCRIPT_RUNNER: True, INSTALL_ESLINT: True}
    )

    assert result.written == [".eslintrc"]
    assert result.extensions == [NPM_SCRIPT_EXTENSION, ESLINT_EXTENSION]
    eslintrc = project_builder.read_json(".eslintrc")
    assert eslintrc["rules"]["no-undef"] == "warn"


def test_declined_answers_write_nothing(project_builder) -> None:
    context = Context(root=str(project_builder.path()))

    result = ProjectWriter().apply(
        context, {CREATE_JSCONFIG: False, INSTALL_NPM_SCRIPT_RUNNER: False, INSTALL_ESLINT: False}
    )

    assert result.written == []
    assert result.extensions == []
    assert list(project_builder.path().iterdir()) == []
