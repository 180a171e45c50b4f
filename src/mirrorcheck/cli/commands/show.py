"""Show command implementation."""

from pathlib import Path

import typer

from ...domain.exceptions import MetalinkError
from ...parsing import parse_file
from ..output.report import display_error, display_metalink


def show(
    metalink: Path = typer.Argument(..., help="Metalink file to inspect"),
    name: str = typer.Option(
        ...,
        "--name",
        "-n",
        help="Filename the metalink must describe",
    ),
) -> None:
    """Print the hashes and mirrors declared in a metalink.

    Examples:
        mirrorcheck show repomd.xml.metalink --name repomd.xml
    """
    try:
        context = parse_file(metalink, name)
    except MetalinkError as e:
        display_error(name, e)
        raise typer.Exit(code=1)

    display_metalink(context)
