"""Rename image API command.

CLI: sirc rename image <path> <new-name>
"""

from collections.abc import Iterator

from .._output_schemas.rename import RenameImageOutput
from ..StageResult import StageResult


def cmd_image(path: str, new_name: str) -> StageResult:
    """Rename one image, keeping folder and extension, and update links to it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..controller.ImageController import ImageController
        from ..vault.Vault import Vault
        from ..vault.to_vault_path import to_vault_path

        def fail(message: str) -> None:
            result_obj.output = RenameImageOutput(errors=[message], warnings=[], path=path).model_dump(mode="python")
            result_obj.result = f"Rename failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        yield (0.4, "Renaming image...")
        try:
            with Vault(config.vault) as vault:
                image_path = to_vault_path(path, vault.vault_path)
                file_name = ImageController.from_config(config, vault).rename_image(image_path, new_name)
        except Exception as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = RenameImageOutput(
            errors=[], warnings=[], path=image_path, new_name=file_name
        ).model_dump(mode="python")
        result_obj.result = f"Renamed to {file_name}"
        result_obj.success = True

    return StageResult(announce=f"Renaming {path}...", progress_callback=do_work)
