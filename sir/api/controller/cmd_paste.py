"""Paste API command.

CLI: sirc paste <note> <image-file>
"""

import mimetypes
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.controller import PasteOutput
from ..StageResult import StageResult


def cmd_paste(note: str, image_file: str, offset: int | None = None) -> StageResult:
    """Paste an image file from disk into a note, as if it came from the clipboard.

    Args:
        note: Note path, vault-relative or absolute
        image_file: Image on disk; its MIME type is guessed from the extension
        offset: Character offset for the link, end of the note when None
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..vault.Vault import Vault
        from ..vault.to_vault_path import to_vault_path
        from .ImageController import ImageController

        def fail(message: str) -> None:
            result_obj.output = PasteOutput(errors=[message], warnings=[], note=note).model_dump(mode="python")
            result_obj.result = f"Failed to save image: {message}"
            result_obj.success = False

        mime_type = mimetypes.guess_type(image_file)[0] or ""
        if not mime_type.startswith("image/"):
            fail(f"Not an image file: {image_file}")
            return

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        yield (0.3, "Reading image...")
        try:
            data = Path(image_file).expanduser().read_bytes()
        except OSError as e:
            fail(str(e))
            return

        yield (0.6, "Saving image...")
        try:
            with Vault(config.vault) as vault:
                note_path = to_vault_path(note, vault.vault_path)
                controller = ImageController.from_config(config, vault)
                controller.open_document(note_path)
                processed = controller.paste_image(note_path, data, mime_type, offset)
        except Exception as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.output = PasteOutput(
            errors=[], warnings=[], note=note_path, **processed.to_dict()
        ).model_dump(mode="python")
        result_obj.result = f"Image saved as {processed.file_name}"
        result_obj.success = True

    return StageResult(announce=f"Pasting {image_file} into {note}...", progress_callback=do_work)
