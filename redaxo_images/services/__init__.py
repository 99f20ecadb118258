"""Service layer for the image matrix generator."""

from .exceptions import (
    BuildTargetError,
    ConfigError,
    FilesystemError,
    InvalidVersionError,
    MatrixError,
    MissingTemplateError,
)
from .file_service import FileService

__all__ = [
    'BuildTargetError',
    'ConfigError',
    'FileService',
    'FilesystemError',
    'InvalidVersionError',
    'MatrixError',
    'MissingTemplateError',
]
