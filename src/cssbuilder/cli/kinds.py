"""CLI command: cssbuilder kinds -- list part kinds in grammar order."""

import click

from cssbuilder.cli.build import PART_KINDS


@click.command()
def kinds() -> None:
    """List selector part kinds in the order they must appear."""
    for kind, (rank, _) in sorted(PART_KINDS.items(), key=lambda item: item[1][0]):
        click.echo(f"{int(rank)}  {kind}")
