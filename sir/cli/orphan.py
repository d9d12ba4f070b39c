"""Orphan Typer app factory."""

import typer

from sir.api.orphan.cmd_clean import cmd_clean
from sir.api.orphan.cmd_scan import cmd_scan
from sir.cli._handle_stage_result import _handle_stage_result


def orphan() -> typer.Typer:
    """Create and configure the orphan Typer app."""
    app = typer.Typer(
        name="orphan",
        help="Find and clean up images nothing links to",
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

    @app.command(name="scan")
    def scan_cmd() -> None:
        """List orphaned images."""
        _handle_stage_result(cmd_scan)()

    @app.command(name="clean")
    def clean_cmd(
        delete: bool = typer.Option(False, "--delete", help="Move orphans to the vault trash"),
        move_to: str | None = typer.Option(None, "--move-to", help="Move orphans into this vault folder"),
    ) -> None:
        """Trash orphaned images or move them into a folder."""
        if delete == (move_to is not None):
            typer.echo("Error: give exactly one of --delete or --move-to", err=True)
            raise typer.Exit(2)
        if delete:
            _handle_stage_result(cmd_clean)("delete")
        else:
            _handle_stage_result(cmd_clean)("move", move_to)

    return app
