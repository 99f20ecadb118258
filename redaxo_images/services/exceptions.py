"""Custom exceptions for the image matrix generator."""

from pathlib import Path
from typing import Optional, Union


class MatrixError(Exception):
    """Base exception for all matrix generation errors."""

    pass


class ConfigError(MatrixError):
    """Exception raised when the matrix configuration cannot be used."""

    pass


class InvalidVersionError(MatrixError):
    """Exception raised when a release version is not X, X.Y or X.Y.Z."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(
            f"Invalid release version '{version}': expected X, X.Y or X.Y.Z "
            "without leading zeros or prerelease suffixes"
        )


class MissingTemplateError(MatrixError):
    """Exception raised when a template file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"Template not found: {self.path}")


class FilesystemError(MatrixError):
    """Exception raised when a directory or file cannot be written."""

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        message = f"Filesystem error at {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class BuildTargetError(MatrixError):
    """Exception raised when generating one matrix entry fails."""

    def __init__(self, target: str, error: MatrixError):
        self.target = target
        self.error = error
        super().__init__(f"Failed to generate {target}: {error}")
