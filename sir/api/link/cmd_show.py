"""Link show API command.

CLI: sirc link show <note>
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkShowOutput
from ..StageResult import StageResult
from .parse_image_links import parse_image_links


def cmd_show(note: str) -> StageResult:
    """List the image links in a note, in order of appearance.

    Args:
        note: Note path, vault-relative or absolute
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.SirConfig import SirConfig
        from ..vault.Vault import Vault
        from ..vault.to_vault_path import to_vault_path

        def fail(message: str) -> None:
            result_obj.output = LinkShowOutput(errors=[message], warnings=[], note=note).model_dump(mode="python")
            result_obj.result = f"Link show failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        yield (0.4, "Reading note...")
        try:
            with Vault(config.vault) as vault:
                note_path = to_vault_path(note, vault.vault_path)
                text = vault.read(note_path)
        except Exception as e:
            fail(str(e))
            return

        yield (0.8, "Parsing image links...")
        links = [link.to_dict() for link in parse_image_links(text)]

        yield (1.0, "Complete")
        result_obj.output = LinkShowOutput(
            errors=[], warnings=[], note=note_path, links=links, count=len(links)
        ).model_dump(mode="python")
        result_obj.result = f"Found {len(links)} image link(s) in {note_path}"
        result_obj.success = True

    return StageResult(announce=f"Listing image links in {note}...", progress_callback=do_work)
