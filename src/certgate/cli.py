"""CLI entry point for certgate.

Usage:
    certgate /etc/letsencrypt/live/<domain>/cert.pem

Writes the certificate bytes to stdout and exits 0, or writes one diagnostic
line to stderr and exits non-zero. Stdout is reserved for certificate bytes;
logging and diagnostics go to stderr.

The command takes no options. Every argument, including ones that look like
``--help``, counts towards the single PATH, so a caller can never get exit 0
with anything but certificate bytes on stdout.
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from certgate.config import CONFINEMENT_ROOTS
from certgate.gate import CertGateError, read_cert

console = Console(stderr=True)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def _setup_logging() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _fail(message: str) -> None:
    console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


class _RawArgsCommand(click.Command):
    """Keeps argv exactly as given; click's parser drops a bare ``--``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta["certgate.argv"] = list(args)
        return super().parse_args(ctx, args)


@click.command(
    cls=_RawArgsCommand,
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "help_option_names": [],
    },
)
@click.argument("paths", nargs=-1, type=click.UNPROCESSED, metavar="PATH")
@click.pass_context
def cli(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """Print a Let's Encrypt certificate, after confining PATH to the archive."""
    _setup_logging()

    argv: list[str] = ctx.meta["certgate.argv"]
    if len(argv) != 1:
        console.print(f"Usage: {escape(ctx.command_path)} /path/to/cert.pem", soft_wrap=True)
        sys.exit(EXIT_USAGE)

    try:
        read_cert(argv[0], sys.stdout.buffer, roots=CONFINEMENT_ROOTS)
    except CertGateError as exc:
        _fail(str(exc))
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    cli()
