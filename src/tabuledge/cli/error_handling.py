"""CLI error handling helpers."""

import click


def handle_domain_error(ctx: click.Context, error: ValueError) -> None:
    """Render a domain or input error and exit with failure.

    Domain errors subclass ValueError, as do parse failures raised by the
    amount and date parsers.
    """
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
