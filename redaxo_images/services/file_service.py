"""File service for abstracting output directory operations."""

import logging
import shutil
import stat
from pathlib import Path

from .exceptions import FilesystemError, MissingTemplateError

logger = logging.getLogger(__name__)


class FileService:
    """Service for filesystem operations with clean abstractions."""

    def ensure_dir(self, path: Path) -> Path:
        """Create a directory and its parents if they do not exist.

        Args:
            path: Directory to create

        Returns:
            The directory path

        Raises:
            FilesystemError: If the directory cannot be created
        """
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(path, e.strerror or str(e)) from e
        return path

    def read_template(self, path: Path) -> str:
        """Read a template file.

        Raises:
            MissingTemplateError: If the template does not exist
            FilesystemError: If the template cannot be read
        """
        if not path.is_file():
            raise MissingTemplateError(path)
        try:
            with path.open(encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            raise FilesystemError(path, e.strerror or str(e)) from e

    def write_text(self, path: Path, content: str) -> None:
        """Write the whole file in one go, replacing any previous content.

        Raises:
            FilesystemError: If the file cannot be written
        """
        try:
            # newline="" keeps the template's line endings untouched
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise FilesystemError(path, e.strerror or str(e)) from e
        logger.debug(f"Wrote {path}")

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy a file with its permission bits.

        Raises:
            MissingTemplateError: If the source does not exist
            FilesystemError: If the copy fails
        """
        if not source.is_file():
            raise MissingTemplateError(source)
        try:
            shutil.copy2(source, destination)
        except OSError as e:
            raise FilesystemError(destination, e.strerror or str(e)) from e
        logger.debug(f"Copied {source} to {destination}")

    def make_executable(self, path: Path) -> None:
        """Add execute permission for user, group and others (chmod +x).

        Raises:
            FilesystemError: If the mode cannot be changed
        """
        try:
            mode = path.stat().st_mode
            path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as e:
            raise FilesystemError(path, e.strerror or str(e)) from e
