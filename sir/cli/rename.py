"""Rename Typer app factory."""

import typer

from sir.api.rename.cmd_image import cmd_image
from sir.api.rename.cmd_preview import cmd_preview
from sir.api.rename.cmd_run import cmd_run
from sir.cli._handle_stage_result import _handle_stage_result

_SCOPES = ("note", "vault")
_MODES = ("replace", "prepend", "pattern")
_FILTERS = ("all", "generic")


def _check_choice(name: str, value: str, choices: tuple[str, ...]) -> None:
    if value not in choices:
        typer.echo(f"Error: --{name} must be one of {', '.join(choices)}, got '{value}'", err=True)
        raise typer.Exit(2)


def rename() -> typer.Typer:
    """Create and configure the rename Typer app."""
    app = typer.Typer(
        name="rename",
        help="Rename images after the notes that embed them",
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

    @app.command(name="preview")
    def preview_cmd(
        scope: str = typer.Option("vault", help="Scan one note or the whole vault: note or vault"),
        note: str | None = typer.Option(None, help="Note to scan when scope is note"),
        mode: str = typer.Option("replace", help="Naming mode: replace, prepend or pattern"),
        image_filter: str = typer.Option("generic", "--filter", help="Which images: all or generic"),
        pattern: str | None = typer.Option(None, help="Template with {note}, {original} and {n}"),
    ) -> None:
        """Preview bulk renames without touching any file."""
        _check_choice("scope", scope, _SCOPES)
        _check_choice("mode", mode, _MODES)
        _check_choice("filter", image_filter, _FILTERS)
        _handle_stage_result(cmd_preview)(scope, note, mode, image_filter, pattern)

    @app.command(name="run")
    def run_cmd(
        scope: str = typer.Option("vault", help="Scan one note or the whole vault: note or vault"),
        note: str | None = typer.Option(None, help="Note to scan when scope is note"),
        mode: str = typer.Option("replace", help="Naming mode: replace, prepend or pattern"),
        image_filter: str = typer.Option("generic", "--filter", help="Which images: all or generic"),
        pattern: str | None = typer.Option(None, help="Template with {note}, {original} and {n}"),
        select: str = typer.Option("generic", help="Which proposals to execute: all or generic"),
    ) -> None:
        """Execute bulk renames for the selected proposals."""
        _check_choice("scope", scope, _SCOPES)
        _check_choice("mode", mode, _MODES)
        _check_choice("filter", image_filter, _FILTERS)
        _check_choice("select", select, _FILTERS)
        _handle_stage_result(cmd_run)(scope, note, mode, image_filter, pattern, select)

    @app.command(name="image")
    def image_cmd(
        path: str = typer.Argument(..., help="Image to rename"),
        new_name: str = typer.Argument(..., help="New name without extension"),
    ) -> None:
        """Rename one image and update the links to it."""
        _handle_stage_result(cmd_image)(path, new_name)

    return app
