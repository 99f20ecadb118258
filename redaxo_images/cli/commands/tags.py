"""List the image tags of the build matrix without writing files."""

from pathlib import Path
from typing import Optional

import click

from redaxo_images.cli.helpers import (
    apply_release_overrides,
    fail,
    load_matrix_config,
    print_table,
)
from ...core.matrix_builder import MatrixBuilder
from ...services.exceptions import MatrixError


@click.command()
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Matrix configuration file (default: ./matrix.yml or built-in defaults)'
)
@click.option('--version', 'release_version', help='REDAXO release version to tag')
def tags(config_path: Optional[Path], release_version: Optional[str]) -> None:
    """Show the tags every image would be pushed with"""
    try:
        config_manager, config = load_matrix_config(config_path)
        config = apply_release_overrides(config, release_version)
        builder = MatrixBuilder(
            config,
            templates_dir=config_manager.templates_path(config),
            output_dir=Path('.'),
        )
        targets = builder.plan()
    except MatrixError as e:
        fail(e)

    rows = [
        [target.php_version, target.variant, str(target.directory), "\n".join(target.tags)]
        for target in targets
    ]
    print_table(["PHP", "VARIANT", "DIRECTORY", "TAGS"], rows, tablefmt="grid")
