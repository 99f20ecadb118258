"""Models describing generated build targets and files."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class BuildTarget:
    """One (PHP version, variant) entry of the build matrix."""

    php_version: str
    variant: str
    base: str
    cmd: str
    directory: Path
    tags: Tuple[str, ...] = ()

    @property
    def label(self) -> str:
        """Short label used in messages, e.g. php8.1/apache."""
        return f"{self.directory.parent.name}/{self.variant}"


@dataclass(frozen=True)
class OutputArtifact:
    """A file waiting to be written, either rendered or copied from source."""

    path: Path
    content: str = ""
    source: Optional[Path] = None
    executable: bool = False
