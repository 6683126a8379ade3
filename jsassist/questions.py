"""Ordered confirmation questions and their applicability rules."""

from __future__ import annotations

from typing import Sequence

from .logging import get_logger
from .models import Answers, Context, Question
from .prompter import Prompter

CREATE_JSCONFIG = "create_jsconfig"
SET_ALLOW_JS = "set_allow_js"
CONFIRM_ALLOW_JS = "confirm_allow_js"
ACQUIRE_TYPES = "acquire_types"
INSTALL_NPM_SCRIPT_RUNNER = "install_npm_script_runner"
INSTALL_ESLINT = "install_eslint"

NPM_SCRIPT_EXTENSION = "eg2.vscode-npm-script"
ESLINT_EXTENSION = "dbaeumer.vscode-eslint"

logger = get_logger("questions")


def _needs_allow_js(context: Context) -> bool:
    return context.ts_config is not None and not context.allows_js


def _missing_extension(context: Context, extension: str) -> bool:
    installed = context.installed_extensions
    return installed is not None and extension not in installed


QUESTIONS: Sequence[Question] = (
    Question(
        id=CREATE_JSCONFIG,
        prompt="Create 'jsconfig.json' file?",
        is_applicable=lambda ctx, answers: ctx.js_config is None and ctx.ts_config is None,
    ),
    Question(
        id=SET_ALLOW_JS,
        prompt="Should I adjust 'tsconfig.json' to allow for JavaScript files (strongly recommended)?",
        is_applicable=lambda ctx, answers: _needs_allow_js(ctx),
    ),
    # Declining the allowJs change once leads to a single warning re-ask.
    Question(
        id=CONFIRM_ALLOW_JS,
        prompt=(
            "Sure about that? The presence of a 'tsconfig.json'-file shadows a "
            "'jsconfig.json'-file and without the 'allowJs'-flag there will be no "
            "support for JavaScript. Should I add the 'allowJs'-flag?"
        ),
        is_applicable=lambda ctx, answers: answers.get(SET_ALLOW_JS) is False,
    ),
    Question(
        id=ACQUIRE_TYPES,
        prompt="Install type-definition files (.d.ts) and adjust 'package.json'?",
        is_applicable=lambda ctx, answers: ctx.pending_package_json is not None,
    ),
    Question(
        id=INSTALL_NPM_SCRIPT_RUNNER,
        prompt="Install 'npm script runner'-extension?",
        is_applicable=lambda ctx, answers: _missing_extension(ctx, NPM_SCRIPT_EXTENSION),
    ),
    Question(
        id=INSTALL_ESLINT,
        prompt="Install 'eslint'-extension?",
        is_applicable=lambda ctx, answers: _missing_extension(ctx, ESLINT_EXTENSION),
    ),
)


def ask(
    context: Context,
    prompter: Prompter,
    questions: Sequence[Question] = QUESTIONS,
) -> Answers:
    """Ask every applicable question in order and collect the answers.

    Each predicate sees the answers given so far, so later questions can depend
    on earlier ones. Questions that never apply are absent from the result.
    """
    answers: Answers = {}
    for question in questions:
        if not question.is_applicable(context, answers):
            logger.debug("Skipping question %s", question.id)
            continue
        answers[question.id] = bool(prompter.confirm(question.prompt))
    return answers


def allow_js_confirmed(answers: Answers) -> bool:
    """True when either allowJs question was answered yes."""
    return bool(answers.get(SET_ALLOW_JS) or answers.get(CONFIRM_ALLOW_JS))


__all__ = [
    "ACQUIRE_TYPES",
    "CONFIRM_ALLOW_JS",
    "CREATE_JSCONFIG",
    "ESLINT_EXTENSION",
    "INSTALL_ESLINT",
    "INSTALL_NPM_SCRIPT_RUNNER",
    "NPM_SCRIPT_EXTENSION",
    "QUESTIONS",
    "SET_ALLOW_JS",
    "allow_js_confirmed",
    "ask",
]
