"""REDAXO Docker images - generate Dockerfiles and tags for every PHP version and variant."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
