"""Update command: generate Dockerfiles and hooks for the whole matrix."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from redaxo_images.cli.helpers import (
    apply_release_overrides,
    fail,
    load_matrix_config,
    resolve_templates_dir,
)
from ...core.matrix_builder import MatrixBuilder
from ...models.artifact import BuildTarget
from ...services.exceptions import MatrixError


@click.command()
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Matrix configuration file (default: ./matrix.yml or built-in defaults)'
)
@click.option(
    '--output-dir', '-o',
    type=click.Path(file_okay=False, path_type=Path),
    default='.',
    show_default=True,
    help='Directory receiving the php<version>/<variant> folders'
)
@click.option(
    '--templates-dir', '-t',
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory holding the templates (overrides the configuration)'
)
@click.option('--version', 'release_version', help='REDAXO release version to build')
@click.option('--sha1', help='SHA1 checksum of the release zip')
def update(config_path: Optional[Path], output_dir: Path, templates_dir: Optional[Path],
           release_version: Optional[str], sha1: Optional[str]) -> None:
    """Generate all Dockerfiles from templates and the post_push hooks containing image tags.

    Run this whenever the REDAXO version or the Docker setup changes, then
    commit and push the result so the registry triggers automated builds.
    """
    console = Console()

    try:
        config_manager, config = load_matrix_config(config_path)
        config = apply_release_overrides(config, release_version, sha1)
        builder = MatrixBuilder(
            config,
            templates_dir=resolve_templates_dir(config_manager, config, templates_dir),
            output_dir=output_dir,
        )

        console.print(f"[bold]REDAXO {escape(config.release.version)}[/bold]")

        def report(target: BuildTarget) -> None:
            console.print(
                f"- Image: PHP {escape(target.php_version)} {escape(target.variant)} "
                f"[dim]{escape(f'[base: {target.base}] [cmd: {target.cmd}]')}[/dim]"
            )
            console.print("  Tags:")
            for tag in target.tags:
                console.print(f"  - [cyan]{escape(tag)}[/cyan]")

        targets = builder.run(reporter=report)
    except MatrixError as e:
        fail(e)

    console.print(f"[green]Generated {len(targets)} images in {escape(str(output_dir))}[/green]")
