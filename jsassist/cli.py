"""CLI entrypoint for the jsassist command."""

from __future__ import annotations

import argparse
import sys

from .assistant import Assistant
from .config import ConfigError
from .inspector import InspectionError
from .logging import configure_logging
from .prompter import PromptAborted


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsassist",
        description="Prepare a JavaScript project for editor language support and linting.",
    )
    parser.add_argument(
        "editor",
        nargs="?",
        default=None,
        help="Editor binary used to list and install extensions (defaults to code-insiders).",
    )
    parser.add_argument(
        "-C",
        "--directory",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for jsassist."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    assistant = Assistant(args.editor)
    try:
        outcome = assistant.run(args.directory)
    except (ConfigError, InspectionError) as exc:
        parser.exit(1, f"{exc}\n")
    except PromptAborted:
        parser.exit(1, "Aborted, no files were changed.\n")
    except KeyboardInterrupt:
        parser.exit(1, "Interrupted.\n")
    except OSError as exc:
        parser.exit(1, f"jsassist failed: {exc}\nRun with --verbose for more details.\n")

    if outcome.written:
        print("Updated " + ", ".join(outcome.written))
    else:
        print("No files changed")


if __name__ == "__main__":
    main(sys.argv[1:])
