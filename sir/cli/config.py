"""Config Typer app factory."""

import typer

from sir.api.config.cmd_show import cmd_show
from sir.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="Configuration section name (omit to list sections)"),
    ) -> None:
        """Show configuration for a section, or list the sections."""
        _handle_stage_result(cmd_show)(section)

    return app
