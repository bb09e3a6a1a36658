"""Feeder CLI entry point."""

import sys

import click

from ..context import FeederContext, configure_logging, pass_context
from ..core.relay import run
from ..models.errors import FeederError


@click.command(
    context_settings=dict(ignore_unknown_options=True, allow_extra_args=True)
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@pass_context
def cli(ctx: FeederContext, args):
    """Echo FILE_PATH line by line, then relay stdin until end of stream.

    Every line is written to stdout with a single trailing newline and
    flushed immediately, so the output can feed an interactive consumer.
    Arguments after the first are ignored.

    Examples:
        feeder program.txt | repl     # Prelude from file, then the terminal
        printf 'a\\nb\\n' | feeder     # Plain stdin passthrough

    Note:
        --help is the only option. When passing a path that starts with
        '-' (including a file literally named --help), use '--' to stop
        option parsing before the argument, e.g.:
          feeder -- -weird-name.txt
    """
    configure_logging(ctx.log_level)

    try:
        status = run(args, ctx.input_stream, ctx.output_stream)
    except FeederError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    sys.exit(status)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
