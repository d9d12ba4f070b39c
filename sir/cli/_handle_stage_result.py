"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format stored by the root callback, defaulting to yaml."""
    import click

    current = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F) -> F:
    """Wrap a command function so the CLI shows its four stages and exits with its status.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, JSON or YAML)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from sir.cli.display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format())

    return wrapper  # type: ignore[return-value]
