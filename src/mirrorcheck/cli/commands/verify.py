"""Verify command implementation."""

from pathlib import Path
from typing import Optional

import typer

from ...domain.exceptions import MetalinkError
from ...parsing import parse_file
from ..output.report import display_error, display_verification_passed
from ..state import CLIState


def verify(
    ctx: typer.Context,
    metalink: Path = typer.Argument(..., help="Metalink file describing FILE"),
    file: Path = typer.Argument(..., help="Downloaded file to verify"),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Filename the metalink must describe (default: FILE's name)",
    ),
) -> None:
    """Verify a downloaded file against the best hash in a metalink.

    Examples:
        mirrorcheck verify repomd.xml.metalink repomd.xml
        mirrorcheck verify metalink.xml download.tmp --name repomd.xml
    """
    state: CLIState = ctx.obj
    expected_name = name or file.name

    try:
        context = parse_file(metalink, expected_name)
        result = state.create_verifier().verify(file, context)
    except MetalinkError as e:
        display_error(expected_name, e)
        raise typer.Exit(code=1)

    display_verification_passed(expected_name, result)
