"""Result display functions for CLI."""

import typer

from ...domain.exceptions import MetalinkError
from ...domain.hash_validation import VerificationResult
from ...domain.metalink import MetalinkContext


def display_verification_passed(file_name: str, result: VerificationResult) -> None:
    """Display a successful verification.

    Args:
        file_name: Name of the verified file
        result: Verification details
    """
    typer.secho(f"✓ {file_name}: OK", fg=typer.colors.GREEN)
    typer.echo(f"  {result.hash_type}: {result.calculated_hash}")


def display_error(file_name: str, error: MetalinkError) -> None:
    """Display a parse or verification failure.

    Args:
        file_name: Name of the file being checked
        error: The error that stopped the check
    """
    typer.secho(f"✗ {file_name}: FAILED", fg=typer.colors.RED)
    typer.secho(f"  {type(error).__name__}: {error}", fg=typer.colors.RED)


def display_metalink(context: MetalinkContext) -> None:
    """Display the parsed contents of a metalink.

    Unsupported hash types are listed but marked, since verification never
    uses them.
    """
    typer.echo(f"File: {context.filename}")
    if context.size is not None:
        typer.echo(f"Size: {context.size} bytes")

    typer.echo(f"Hashes ({len(context.hashes)}):")
    for entry in context.hashes:
        marker = "" if entry.algorithm is not None else " (unsupported)"
        typer.echo(f"  {entry.type}{marker}: {entry.value}")

    typer.echo(f"Mirrors ({len(context.urls)}):")
    for url in context.urls_by_preference():
        details = ", ".join(
            value
            for value in (url.protocol, url.type, url.location)
            if value is not None
        )
        suffix = f" [{details}]" if details else ""
        typer.echo(f"  {url.preference:>3} {url.url}{suffix}")
