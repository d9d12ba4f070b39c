"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime

from sir.cli.display.CLIDisplay import CLIDisplay


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
) -> None:
    """Run command once, display each stage, and exit 0 on success or 1 on failure.

    Commands handle their own exceptions and report them in their output.
    """
    result = func(*args, **kwargs)
    display.status(result.announce)

    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    display.output(result.output, format=display_format)
    sys.exit(0 if result.success else 1)
