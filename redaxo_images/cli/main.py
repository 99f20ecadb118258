"""Main CLI entry point for the REDAXO image generator."""

import logging

import click

from .commands.config import config
from .commands.tags import tags
from .commands.update import update


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """Generate REDAXO Docker images for every PHP version and variant"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


# Register commands
cli.add_command(update)
cli.add_command(tags)
cli.add_command(config)


if __name__ == '__main__':
    cli()
