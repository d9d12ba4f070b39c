"""StageResult dataclass shared by every cmd_* function."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Outcome of a command run in four stages: announce, progress, result, output.

    The CLI prints ``announce``, drains ``progress_callback`` (which fills in
    the remaining fields on this same object), prints ``result`` and renders
    ``output`` in the requested format. ``success`` decides the exit code.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
