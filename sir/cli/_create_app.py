"""Create the main Typer CLI app."""

import typer

from sir.cli.config import config
from sir.cli.link import link
from sir.cli.orphan import orphan
from sir.cli.paste import paste
from sir.cli.rename import rename
from sir.cli.watch import watch


def _configure_logging() -> None:
    from sir.api.config.SirConfig import SirConfig
    from sir.utils.configure_logging import configure_logging

    try:
        level = SirConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Smart Image Renamer CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config(), name="config")
    app.add_typer(link(), name="link")
    app.add_typer(rename(), name="rename")
    app.add_typer(orphan(), name="orphan")
    app.add_typer(paste(), name="paste")
    app.add_typer(watch(), name="watch")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        _configure_logging()

    return app
