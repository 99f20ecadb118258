"""Core functionality for the REDAXO image generator."""

from .matrix_builder import MatrixBuilder
from .tags import format_tags, generate_tags
from .template_renderer import placeholder, render
from .version_tree import is_valid_version, resolve_version_tree

__all__ = [
    'MatrixBuilder',
    'format_tags',
    'generate_tags',
    'is_valid_version',
    'placeholder',
    'render',
    'resolve_version_tree',
]
