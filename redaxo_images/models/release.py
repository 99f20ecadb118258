"""Release and build matrix configuration models."""

import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


SHA1_PATTERN = re.compile(r"[0-9a-fA-F]{40}")


class Release(BaseModel):
    """Upstream REDAXO release the images are built for."""
    version: str = Field(..., description="Release version, e.g. 5.15.0")
    sha1: str = Field(..., description="SHA1 checksum of the release zip")

    @field_validator("sha1")
    @classmethod
    def check_sha1(cls, value: str) -> str:
        if not SHA1_PATTERN.fullmatch(value):
            raise ValueError("sha1 must be 40 hexadecimal characters")
        return value


class Variant(BaseModel):
    """Image variant such as apache or fpm."""
    name: str
    base: str = Field(..., description="Base identifier selecting templates/Dockerfile-<base>")
    cmd: str = Field(..., description="Command the image runs")
    extras: str = ""
    extras_file: Optional[str] = Field(
        None, description="File below the templates directory holding the extras block"
    )


class MatrixConfig(BaseModel):
    """Build matrix of PHP versions and variants for one release."""
    release: Release
    php_versions: List[str]
    default_php_version: str
    variants: List[Variant]
    default_variant: str
    runtime_prefix: str = "php"
    templates_dir: str = "templates"

    @model_validator(mode="after")
    def check_axes(self) -> "MatrixConfig":
        if not self.php_versions:
            raise ValueError("php_versions must not be empty")
        if len(set(self.php_versions)) != len(self.php_versions):
            raise ValueError("php_versions must not contain duplicates")
        if self.default_php_version not in self.php_versions:
            raise ValueError(
                f"default_php_version '{self.default_php_version}' is not in php_versions"
            )

        names = self.variant_names()
        if not names:
            raise ValueError("variants must not be empty")
        if len(set(names)) != len(names):
            raise ValueError("variant names must be unique")
        if self.default_variant not in names:
            raise ValueError(f"default_variant '{self.default_variant}' is not in variants")
        return self

    def variant_names(self) -> List[str]:
        """Get variant names in declaration order."""
        return [variant.name for variant in self.variants]

    def get_variant(self, name: str) -> Variant:
        """Look up a variant by name."""
        for variant in self.variants:
            if variant.name == name:
                return variant
        raise KeyError(name)
