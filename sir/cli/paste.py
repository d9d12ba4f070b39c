"""Paste Typer app factory - save an image file into a note."""

from typing import Annotated

import typer

from sir.api.controller.cmd_paste import cmd_paste
from sir.cli._handle_stage_result import _handle_stage_result


def paste() -> typer.Typer:
    """Create and configure the paste Typer app."""
    app = typer.Typer(
        name="paste",
        help="Save an image named after a note and link it there",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        note: Annotated[str | None, typer.Argument(help="Note to paste into")] = None,
        image_file: Annotated[str | None, typer.Argument(help="Image file on disk")] = None,
        offset: Annotated[int | None, typer.Option(help="Character offset for the link (default: end)")] = None,
    ) -> None:
        """Paste an image file into a note, as if from the clipboard."""
        if note is None or image_file is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)
        _handle_stage_result(cmd_paste)(note, image_file, offset)

    return app
