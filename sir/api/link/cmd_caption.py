"""Link caption API command.

CLI: sirc link caption <note> <image> [--text TEXT | --remove]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkCaptionOutput
from ..StageResult import StageResult
from .find_image_link import find_image_link


def cmd_caption(note: str, image: str, text: str | None = None, remove: bool = False) -> StageResult:
    """Set or remove the caption of an image link in a note.

    Args:
        note: Note path, vault-relative or absolute
        image: Image the link points at (file name or path)
        text: New caption
        remove: Remove the caption instead (size is kept)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..controller.ImageController import ImageController
        from ..vault.Vault import Vault
        from ..vault.to_vault_path import to_vault_path

        def fail(message: str) -> None:
            result_obj.output = LinkCaptionOutput(
                errors=[message], warnings=[], note=note, image=image, caption=text
            ).model_dump(mode="python")
            result_obj.result = f"Caption update failed: {message}"
            result_obj.success = False

        if remove == (text is not None):
            fail("Give either a caption text or --remove")
            return

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        yield (0.4, "Updating caption...")
        try:
            with Vault(config.vault) as vault:
                note_path = to_vault_path(note, vault.vault_path)
                controller = ImageController.from_config(config, vault)
                if remove:
                    changed = controller.remove_caption(note_path, image)
                else:
                    changed = controller.set_caption(note_path, image, text)
                link = find_image_link(vault.read(note_path), image)
        except Exception as e:
            fail(str(e))
            return

        yield (1.0, "Complete")
        warnings = [] if link is not None else [f"No link to {image} in {note_path}"]
        result_obj.output = LinkCaptionOutput(
            errors=[],
            warnings=warnings,
            note=note_path,
            image=image,
            caption=None if remove else text,
            changed=changed,
            link=link.full_match if link else None,
        ).model_dump(mode="python")
        if link is None:
            result_obj.result = f"No link to {image} in {note_path}, nothing changed"
        elif changed:
            result_obj.result = f"Caption {'removed' if remove else 'set'} on {link.full_match}"
        else:
            result_obj.result = f"Caption already up to date on {link.full_match}"
        result_obj.success = True

    action = "Removing caption from" if remove else "Setting caption on"
    return StageResult(announce=f"{action} {image} in {note}...", progress_callback=do_work)
