"""Link Typer app factory."""

import typer

from sir.api.link.cmd_caption import cmd_caption
from sir.api.link.cmd_show import cmd_show
from sir.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Inspect image links and edit captions",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        note: str = typer.Argument(..., help="Note to list image links for"),
    ) -> None:
        """List the image links in a note."""
        _handle_stage_result(cmd_show)(note)

    @app.command(name="caption")
    def caption_cmd(
        note: str = typer.Argument(..., help="Note containing the link"),
        image: str = typer.Argument(..., help="Image the link points at"),
        text: str | None = typer.Option(None, "--text", "-t", help="Caption to set"),
        remove: bool = typer.Option(False, "--remove", help="Remove the caption"),
    ) -> None:
        """Set or remove the caption of an image link."""
        _handle_stage_result(cmd_caption)(note, image, text=text, remove=remove)

    return app
