"""Rename preview API command.

CLI: sirc rename preview --scope note|vault [--note NOTE] --mode replace|prepend|pattern --filter all|generic
"""

from collections.abc import Iterator

from .._output_schemas.rename import RenamePreviewOutput
from ..StageResult import StageResult
from ._constants import BulkRenameMode, BulkRenameScope, ImageFilter
from ._scan_scope import _scan_scope
from .BulkRenamePlanner import BulkRenamePlanner


def cmd_preview(
    scope: BulkRenameScope = "vault",
    note: str | None = None,
    mode: BulkRenameMode = "replace",
    image_filter: ImageFilter = "generic",
    pattern: str | None = None,
) -> StageResult:
    """Show the renames a bulk run would propose, without renaming anything."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..vault.Vault import Vault
        from ..vault.to_vault_path import to_vault_path

        def fail(message: str) -> None:
            result_obj.output = RenamePreviewOutput(
                errors=[message], warnings=[], scope=scope, mode=mode
            ).model_dump(mode="python")
            result_obj.result = f"Rename preview failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        planner = BulkRenamePlanner(config.rename.aggressive_sanitization, config.rename.note_suffixes)
        yield (0.3, "Scanning images...")
        try:
            with Vault(config.vault) as vault:
                note_path = to_vault_path(note, vault.vault_path) if note else None
                images = _scan_scope(vault, scope, note_path)
                yield (0.7, "Planning renames...")
                items = planner.plan(images, mode, image_filter, pattern)
        except Exception as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = RenamePreviewOutput(
            errors=[],
            warnings=[],
            scope=scope,
            mode=mode,
            items=[item.to_dict() for item in items],
            scanned=len(images),
        ).model_dump(mode="python")
        result_obj.result = f"{len(items)} of {len(images)} image(s) would be renamed"
        result_obj.success = True

    return StageResult(announce=f"Previewing {mode} renames ({scope})...", progress_callback=do_work)
