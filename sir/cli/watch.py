"""Watch Typer app factory - react to vault changes."""

from typing import Annotated

import typer

from sir.api.controller.cmd_watch import cmd_watch
from sir.api.controller.DeletePrompt import DeletePrompt
from sir.cli._handle_stage_result import _handle_stage_result


def _confirm_delete(prompt: DeletePrompt) -> bool:
    if prompt.is_orphan:
        question = f"{prompt.image_path} is no longer linked anywhere. Move it to trash?"
    else:
        others = ", ".join(prompt.backlinks)
        question = f"{prompt.image_path} is still linked from {others}. Move it to trash anyway?"
    return typer.confirm(question, default=False, err=True)


def watch() -> typer.Typer:
    """Create and configure the watch Typer app."""
    app = typer.Typer(
        name="watch",
        help="Watch the vault for new images and removed links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        duration: Annotated[float | None, typer.Option(help="Seconds to watch (default: until Ctrl+C)")] = None,
        interval: Annotated[float, typer.Option(help="Seconds between event polls")] = 0.5,
        no_prompt: Annotated[bool, typer.Option("--no-prompt", help="Never offer to trash images")] = False,
    ) -> None:
        """Auto-rename new images and offer to trash images whose last link was removed."""
        confirm = None if no_prompt else _confirm_delete
        _handle_stage_result(cmd_watch)(duration, interval, confirm)

    return app
