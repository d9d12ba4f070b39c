"""Orphan clean API command.

CLI: sirc orphan clean (--delete | --move-to FOLDER)
"""

from collections.abc import Iterator
from typing import Literal

from .._output_schemas.orphan import OrphanCleanOutput
from ..StageResult import StageResult
from .delete_orphans import delete_orphans
from .move_orphans import move_orphans
from .scan_orphans import scan_orphans


def cmd_clean(action: Literal["delete", "move"], target_folder: str = "") -> StageResult:
    """Trash every orphaned image, or move them all into ``target_folder``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..vault.Vault import Vault

        def fail(message: str) -> None:
            result_obj.output = OrphanCleanOutput(
                errors=[message], warnings=[], action=action, target_folder=target_folder
            ).model_dump(mode="python")
            result_obj.result = f"Orphan clean failed: {message}"
            result_obj.success = False

        if action == "move" and not target_folder.strip("/"):
            fail("A target folder is required to move orphans")
            return
        if action not in ("delete", "move"):
            fail(f"Unknown action: {action}")
            return

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        try:
            with Vault(config.vault) as vault:
                yield (0.3, "Scanning for orphans...")
                scan = scan_orphans(vault)
                yield (0.6, f"Processing {len(scan.orphaned)} orphan(s)...")
                if action == "delete":
                    outcome = delete_orphans(vault, scan.orphaned)
                else:
                    outcome = move_orphans(vault, scan.orphaned, target_folder)
        except Exception as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = OrphanCleanOutput(
            errors=outcome.errors,
            warnings=[],
            action=action,
            target_folder=target_folder,
            processed=outcome.success,
            failed=outcome.failed,
        ).model_dump(mode="python")
        verb = "Trashed" if action == "delete" else f"Moved to {target_folder}:"
        result_obj.result = f"{verb} {outcome.success} image(s), {outcome.failed} failed"
        result_obj.success = outcome.failed == 0

    announce = "Trashing orphaned images..." if action == "delete" else f"Moving orphaned images to {target_folder}..."
    return StageResult(announce=announce, progress_callback=do_work)
