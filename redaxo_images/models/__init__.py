"""Models for the REDAXO image generator."""

from .artifact import BuildTarget, OutputArtifact
from .release import MatrixConfig, Release, Variant

__all__ = [
    'BuildTarget',
    'MatrixConfig',
    'OutputArtifact',
    'Release',
    'Variant',
]
