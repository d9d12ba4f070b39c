"""Rename run API command.

CLI: sirc rename run --scope note|vault [--note NOTE] --mode ... --filter ... --select all|generic
"""

from collections.abc import Iterator
from typing import Literal

from .._output_schemas.rename import RenameRunOutput
from ..StageResult import StageResult
from ._constants import BulkRenameMode, BulkRenameScope, ImageFilter
from ._scan_scope import _scan_scope
from .BulkRenamePlanner import BulkRenamePlanner
from .execute_bulk_rename import execute_bulk_rename


def cmd_run(
    scope: BulkRenameScope = "vault",
    note: str | None = None,
    mode: BulkRenameMode = "replace",
    image_filter: ImageFilter = "generic",
    pattern: str | None = None,
    select: Literal["all", "generic"] = "generic",
) -> StageResult:
    """Plan bulk renames, select items explicitly, and execute them.

    Args:
        select: Which proposed items to rename; planned items start unselected
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..vault.Vault import Vault
        from ..vault.to_vault_path import to_vault_path

        def fail(message: str) -> None:
            result_obj.output = RenameRunOutput(errors=[message], warnings=[]).model_dump(mode="python")
            result_obj.result = f"Rename run failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        planner = BulkRenamePlanner(config.rename.aggressive_sanitization, config.rename.note_suffixes)
        try:
            with Vault(config.vault) as vault:
                yield (0.2, "Scanning images...")
                note_path = to_vault_path(note, vault.vault_path) if note else None
                items = planner.plan(_scan_scope(vault, scope, note_path), mode, image_filter, pattern)
                for item in items:
                    item.selected = select == "all" or item.is_generic

                yield (0.5, f"Renaming {sum(item.selected for item in items)} image(s)...")
                outcome = execute_bulk_rename(vault, items)
        except Exception as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = RenameRunOutput(
            errors=outcome.errors,
            warnings=[],
            items=[item.to_dict() for item in items],
            renamed=outcome.success,
            failed=outcome.failed,
        ).model_dump(mode="python")
        result_obj.result = f"Renamed {outcome.success} image(s), {outcome.failed} failed"
        result_obj.success = outcome.failed == 0

    return StageResult(announce=f"Running {mode} renames ({scope})...", progress_callback=do_work)
