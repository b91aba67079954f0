"""Generated source post-processing with external formatters."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Callable

CommandRunner = Callable[[tuple[str, ...], str], str]

GOFMT_COMMAND: tuple[str, ...] = ("gofmt",)


class SourceFormattingError(Exception):
    """Raised when the generated source cannot be formatted."""


def format_go_source(source: str, *, run_command: CommandRunner | None = None) -> str:
    """Pipe ``source`` through ``gofmt`` and return the formatted text."""
    command_runner = run_command or _run_formatter
    return command_runner(GOFMT_COMMAND, source)


def _run_formatter(command: tuple[str, ...], source: str) -> str:
    """Run one formatter command and wrap subprocess errors with domain-friendly messages."""
    command_text = shlex.join(command)
    try:
        completed = subprocess.run(
            list(command),
            input=source,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as exc:
        raise SourceFormattingError(f"Formatter command not found: {command_text}") from exc
    except subprocess.CalledProcessError as exc:
        details = (exc.stderr or "").strip()
        raise SourceFormattingError(
            f"Failed to format code with {command_text} (exit code {exc.returncode}): {details}"
        ) from exc
    return completed.stdout
