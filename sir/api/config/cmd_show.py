"""Show configuration command."""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .SirConfig import SirConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or list the section names when ``section`` is empty."""

    def finish(result_obj: StageResult, message: str, content: dict[str, Any], errors: list[str]) -> None:
        result_obj.result = message
        result_obj.output = ConfigShowOutput(
            errors=errors,
            warnings=[],
            section=section,
            content=content,
            config_path=str(SirConfig.get_config_path()),
        ).model_dump(mode="python")
        result_obj.success = not errors

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            sections = SirConfig.load().to_dict()
        except ValueError as e:
            yield (1.0, "Complete")
            finish(result_obj, f"Failed to load config: {e}", {}, [str(e)])
            return

        yield (1.0, "Complete")
        if not section:
            finish(result_obj, f"Found {len(sections)} section(s)", {"sections": list(sections)}, [])
        elif section in sections:
            finish(result_obj, f"Retrieved configuration for '{section}'", sections[section], [])
        else:
            finish(result_obj, f"Section '{section}' not found", {}, [f"Unknown section: {section}"])

    announce = "Listing configuration sections..." if not section else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
