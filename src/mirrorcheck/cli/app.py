"""CLI application factory."""

from typing import Optional

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from .commands.show import show
from .commands.verify import verify
from .state import CLIState


def create_cli_app(settings: Settings | None = None) -> typer.Typer:
    """Create CLI application with optional settings override.

    Args:
        settings: Optional Settings override for testing

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="mirrorcheck",
        help="Verify downloaded files against metalink checksums",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        chunk_size: Optional[int] = typer.Option(
            None,
            "--chunk-size",
            help="Read buffer size in bytes used when hashing files",
            min=1,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                chunk_size=chunk_size,
                log_level=LogLevel.DEBUG if verbose else None,
            )

        application = create_app(resolved_settings)
        ctx.obj = CLIState(application.settings)

    app.command()(verify)
    app.command()(show)
    return app
