"""CLI Helper Functions for the REDAXO image generator.

This module provides reusable helper functions for CLI commands to reduce
code duplication and standardize behavior across all commands.

The helpers provide:
- Configuration loading with command line overrides
- Consistent error reporting and exit codes
- Table formatting for output
"""

import sys
from pathlib import Path
from typing import Any, List, NoReturn, Optional, Tuple

import click
from pydantic import ValidationError
from tabulate import tabulate

from redaxo_images.core.constants import CONFIG_FILE_NAME
from redaxo_images.models.release import MatrixConfig, Release
from redaxo_images.services.exceptions import ConfigError
from redaxo_images.utils.config_manager import ConfigManager


def fail(error: Any) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def load_matrix_config(config_path: Optional[Path]) -> Tuple[ConfigManager, MatrixConfig]:
    """Load the matrix configuration for a command.

    Args:
        config_path: Explicit configuration file, or None for ./matrix.yml

    Returns:
        Tuple of (config_manager, config)

    Note:
        Without an explicit path and without ./matrix.yml the built-in
        REDAXO defaults are used. An explicit path must exist.
    """
    if config_path is None:
        config_manager = ConfigManager(Path.cwd() / CONFIG_FILE_NAME)
        if not config_manager.exists():
            return config_manager, ConfigManager.default_config()
    else:
        config_manager = ConfigManager(config_path)

    return config_manager, config_manager.load()


def apply_release_overrides(
    config: MatrixConfig,
    version: Optional[str] = None,
    sha1: Optional[str] = None,
) -> MatrixConfig:
    """Return a copy of the config with the release version or checksum replaced.

    Raises:
        ConfigError: If the checksum override is not a valid sha1
    """
    if version is None and sha1 is None:
        return config

    try:
        release = Release(
            version=version if version is not None else config.release.version,
            sha1=sha1 if sha1 is not None else config.release.sha1,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid release override:\n{e}") from e
    return config.model_copy(update={"release": release})


def resolve_templates_dir(
    config_manager: ConfigManager,
    config: MatrixConfig,
    templates_dir: Optional[Path],
) -> Path:
    """Use the --templates-dir option when given, the config's directory otherwise."""
    if templates_dir is not None:
        return templates_dir
    return config_manager.templates_path(config)


def print_table(headers: List[str], rows: List[List[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)


# Re-export commonly used functions for convenience
__all__ = [
    'apply_release_overrides',
    'fail',
    'load_matrix_config',
    'print_table',
    'resolve_templates_dir',
]
