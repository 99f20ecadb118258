"""Configuration management commands for the REDAXO image generator."""

from pathlib import Path
from typing import Optional

import click
import yaml

from redaxo_images.cli.helpers import fail, load_matrix_config
from ...core.constants import CONFIG_FILE_NAME
from ...core.matrix_builder import MatrixBuilder
from ...services.exceptions import MatrixError
from ...utils.config_manager import ConfigManager


config_path_option = click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Matrix configuration file (default: ./matrix.yml or built-in defaults)'
)


@click.group()
def config():
    """Manage the build matrix configuration"""
    pass


@config.command()
@config_path_option
def show(config_path: Optional[Path]):
    """Display the effective matrix configuration"""
    try:
        _, matrix_config = load_matrix_config(config_path)
    except MatrixError as e:
        fail(e)

    click.echo(yaml.safe_dump(matrix_config.model_dump(exclude_none=True), sort_keys=False), nl=False)


@config.command()
@click.option('--force', is_flag=True, help='Overwrite an existing configuration file')
@click.argument('path', required=False, type=click.Path(dir_okay=False, path_type=Path))
def init(force: bool, path: Optional[Path]):
    """Write the default REDAXO matrix configuration"""
    config_manager = ConfigManager(path or Path.cwd() / CONFIG_FILE_NAME)
    if config_manager.exists() and not force:
        click.echo(f"{config_manager.config_file} already exists. Use --force to overwrite.")
        return

    try:
        config_manager.save(ConfigManager.default_config())
    except MatrixError as e:
        fail(e)
    click.echo(f"Wrote default configuration to {config_manager.config_file}")


@config.command()
@config_path_option
def validate(config_path: Optional[Path]):
    """Check the configuration, release version and templates"""
    try:
        config_manager, matrix_config = load_matrix_config(config_path)
        builder = MatrixBuilder(
            matrix_config,
            templates_dir=config_manager.templates_path(matrix_config),
            output_dir=Path('.'),
        )
        targets = builder.plan()
        builder.check_templates()
    except MatrixError as e:
        fail(e)

    click.echo(
        f"Configuration OK: REDAXO {matrix_config.release.version}, "
        f"{len(targets)} images"
    )
