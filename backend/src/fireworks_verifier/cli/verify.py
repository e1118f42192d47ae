"""CLI command verifying a release's Fireworks layout output."""

import sys
from pathlib import Path

import click

from .. import __version__
from ..logging import setup_logging
from ..verifier import ReleaseOutputVerifier, VerificationRun

SUCCESS_MESSAGE = "Fireworks Layout has run correctly!"


@click.command(name="verify")
@click.version_option(version=__version__, prog_name="fireworks-verifier")
@click.option(
    "--output",
    "-o",
    "output",
    required=True,
    type=click.Path(path_type=Path),
    help="The folder where the results are written to.",
)
@click.option(
    "--releaseNumber",
    "-r",
    "release_number",
    required=True,
    type=click.IntRange(min=1),
    help="The most recent Reactome release version.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log each step of the verification")
def verify_command(output: Path, release_number: int, verbose: bool) -> None:
    """Verify Fireworks Layout ran correctly.

    Checks that OUTPUT holds a JSON file for every species and that no
    file shrank by 5% or more since the previous release.
    """
    setup_logging("DEBUG" if verbose else None)

    run = VerificationRun(output_directory=output, release_number=release_number)
    error_messages = ReleaseOutputVerifier(run).verify()

    if not error_messages:
        click.echo(SUCCESS_MESSAGE)
        return

    for message in error_messages:
        click.echo(message, err=True)
    sys.exit(1)
