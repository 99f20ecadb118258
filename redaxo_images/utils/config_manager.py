"""Configuration management utilities."""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from ..core import constants
from ..models.release import MatrixConfig, Release, Variant
from ..services.exceptions import ConfigError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages the build matrix configuration file."""

    def __init__(self, config_file: Path):
        """Initialize config manager."""
        self.config_file = Path(config_file)

    @property
    def base_dir(self) -> Path:
        """Directory relative paths in the configuration are resolved against."""
        return self.config_file.parent

    def exists(self) -> bool:
        return self.config_file.is_file()

    @staticmethod
    def default_config() -> MatrixConfig:
        """Build the default REDAXO matrix."""
        variants = [
            Variant(name=name, **settings)
            for name, settings in constants.DEFAULT_VARIANTS.items()
        ]
        return MatrixConfig(
            release=Release(
                version=constants.DEFAULT_REDAXO_VERSION,
                sha1=constants.DEFAULT_REDAXO_SHA1,
            ),
            php_versions=list(constants.DEFAULT_PHP_VERSIONS),
            default_php_version=constants.DEFAULT_PHP_VERSION,
            variants=variants,
            default_variant=constants.DEFAULT_VARIANT,
            runtime_prefix=constants.RUNTIME_PREFIX,
            templates_dir=constants.TEMPLATES_DIR_NAME,
        )

    def load_data(self) -> Dict[str, Any]:
        """Load the raw YAML mapping.

        Raises:
            ConfigError: If the file is missing or not a YAML mapping
        """
        if not self.exists():
            raise ConfigError(f"Configuration file not found: {self.config_file}")
        try:
            data = yaml.safe_load(self.config_file.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_file}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {self.config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {self.config_file} must be a mapping")
        return data

    def load(self) -> MatrixConfig:
        """Load and validate the matrix configuration.

        Raises:
            ConfigError: If the file is missing, unparsable or invalid
        """
        data = self.load_data()
        try:
            config = MatrixConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_file}:\n{e}") from e
        logger.debug(f"Loaded configuration from {self.config_file}")
        return config

    def save(self, config: MatrixConfig) -> None:
        """Save the matrix configuration as YAML."""
        data = config.model_dump(exclude_none=True)
        try:
            self.config_file.write_text(
                yaml.safe_dump(data, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Cannot write {self.config_file}: {e}") from e

    def templates_path(self, config: MatrixConfig) -> Path:
        """Resolve the templates directory of a configuration."""
        templates_dir = Path(config.templates_dir)
        if templates_dir.is_absolute():
            return templates_dir
        return self.base_dir / templates_dir
