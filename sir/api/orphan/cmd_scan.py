"""Orphan scan API command.

CLI: sirc orphan scan
"""

from collections.abc import Iterator

from .._output_schemas.orphan import OrphanScanOutput
from ..StageResult import StageResult
from .scan_orphans import scan_orphans


def cmd_scan() -> StageResult:
    """List images that no note, canvas or drawing embeds."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..vault.Vault import Vault

        def fail(message: str) -> None:
            result_obj.output = OrphanScanOutput(errors=[message], warnings=[]).model_dump(mode="python")
            result_obj.result = f"Orphan scan failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        yield (0.3, "Scanning documents and images...")
        try:
            with Vault(config.vault) as vault:
                scan = scan_orphans(vault)
        except Exception as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = OrphanScanOutput(
            errors=[],
            warnings=[],
            orphaned=[image.to_dict() for image in scan.orphaned],
            total_count=scan.total_count,
            referenced_count=scan.referenced_count,
            orphaned_bytes=scan.orphaned_bytes,
        ).model_dump(mode="python")
        result_obj.result = f"{len(scan.orphaned)} of {scan.total_count} image(s) are orphaned"
        result_obj.success = True

    return StageResult(announce="Scanning for orphaned images...", progress_callback=do_work)
