"""Watch API command.

CLI: sirc watch [--duration SECONDS]
"""

import time
from collections.abc import Callable, Iterator

from .._output_schemas.controller import WatchOutput
from ..StageResult import StageResult
from .DeletePrompt import DeletePrompt


def cmd_watch(
    duration: float | None = None,
    interval: float = 0.5,
    confirm_delete: Callable[[DeletePrompt], bool] | None = None,
) -> StageResult:
    """Watch the vault: auto-rename new images and offer to trash images whose last link was removed.

    Args:
        duration: Seconds to watch; until interrupted when None
        interval: Seconds between event polls
        confirm_delete: Asked before trashing; without it nothing is trashed
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from watchdog.observers import Observer

        from ...utils.get_logger import get_logger
        from ..config.SirConfig import SirConfig
        from ..vault.Vault import Vault
        from ._EventHandler import _EventHandler
        from ._process_events import _process_events
        from .ImageController import ImageController

        logger = get_logger("watch")

        def fail(message: str, vault_dir: str = "") -> None:
            result_obj.output = WatchOutput(errors=[message], warnings=[], vault=vault_dir).model_dump(mode="python")
            result_obj.result = f"Watch failed: {message}"
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = SirConfig.load()
        except ValueError as e:
            fail(f"Failed to load config: {e}")
            return

        renamed: list[str] = []
        trashed: list[str] = []
        try:
            with Vault(config.vault) as vault:
                controller = ImageController.from_config(config, vault, confirm_delete=confirm_delete)
                for document in vault.iter_documents():
                    if document.extension.lower() == "md":
                        controller.open_document(document.path, activate=False)

                handler = _EventHandler()
                observer = Observer()
                observer.schedule(handler, str(vault.vault_path), recursive=True)
                observer.start()
                logger.info(f"Watching {vault.vault_path}")
                yield (0.2, f"Watching {vault.vault_path} (Ctrl+C to stop)...")

                deadline = time.monotonic() + duration if duration is not None else None
                try:
                    while deadline is None or time.monotonic() < deadline:
                        renamed.extend(_process_events(controller, handler.get_and_clear_events()))
                        trashed.extend(p.image_path for p in controller.poll() if p.trashed)
                        time.sleep(interval)
                except KeyboardInterrupt:
                    logger.info("Watch interrupted")
                finally:
                    observer.stop()
                    observer.join()

                renamed.extend(_process_events(controller, handler.get_and_clear_events()))
                trashed.extend(p.image_path for p in controller.flush() if p.trashed)
        except Exception as e:
            fail(str(e), config.vault.base_dir)
            return

        yield (1.0, "Complete")
        result_obj.output = WatchOutput(
            errors=[], warnings=[], vault=config.vault.base_dir, renamed=renamed, trashed=trashed
        ).model_dump(mode="python")
        result_obj.result = f"Renamed {len(renamed)} image(s), trashed {len(trashed)}"
        result_obj.success = True

    return StageResult(announce="Starting vault watch...", progress_callback=do_work)
