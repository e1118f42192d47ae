"""CLI entry point for the Fireworks verifier.

Usage:
    fireworks-verifier -o /path/to/fireworks/output -r 92
"""

import sys

import click

from .verify import verify_command


def main(args: list[str] | None = None) -> None:
    """Run the verifier command.

    Usage errors exit with status 1 to match the verification failure
    status, instead of click's default of 2.
    """
    try:
        exit_code = verify_command.main(
            args=args, prog_name="fireworks-verifier", standalone_mode=False
        )
    except click.ClickException as e:
        e.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)
    sys.exit(exit_code or 0)


__all__ = ["main", "verify_command"]
