"""Command 'help' of todomd"""

import typer


def show_help(ctx: typer.Context) -> None:
    """Print this help message."""
    root = ctx.find_root()
    typer.echo(root.get_help())
