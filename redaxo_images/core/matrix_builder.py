"""Build matrix generation logic."""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from . import constants
from .tags import generate_tags
from .template_renderer import build_dockerfile_context, build_hook_context, render
from .version_tree import resolve_version_tree
from ..models.artifact import BuildTarget, OutputArtifact
from ..models.release import MatrixConfig, Variant
from ..services.exceptions import BuildTargetError, FilesystemError, MissingTemplateError
from ..services.file_service import FileService

logger = logging.getLogger(__name__)

Reporter = Callable[[BuildTarget], None]


class MatrixBuilder:
    """Generates Dockerfiles, hooks and entrypoints for every matrix entry."""

    def __init__(
        self,
        config: MatrixConfig,
        templates_dir: Path,
        output_dir: Path,
        file_service: Optional[FileService] = None,
    ):
        """Initialize builder."""
        self.config = config
        self.templates_dir = Path(templates_dir)
        self.output_dir = Path(output_dir)
        self.file_service = file_service or FileService()

    def dockerfile_template(self, base: str) -> Path:
        """Get the Dockerfile template for a base identifier."""
        return self.templates_dir / f"{constants.DOCKERFILE_TEMPLATE_PREFIX}{base}"

    @property
    def hook_template(self) -> Path:
        return self.templates_dir / constants.HOOK_TEMPLATE_NAME

    @property
    def entrypoint_template(self) -> Path:
        return self.templates_dir / constants.ENTRYPOINT_TEMPLATE_NAME

    def target_dir(self, php_version: str, variant: str) -> Path:
        """Get the output directory for a PHP version and variant."""
        return self.output_dir / f"{self.config.runtime_prefix}{php_version}" / variant

    def plan(self) -> List[BuildTarget]:
        """Compute every build target without touching the filesystem.

        Raises:
            InvalidVersionError: If the release version is not X, X.Y or X.Y.Z
        """
        config = self.config
        aliases = resolve_version_tree(config.release.version)

        targets = []
        for php_version in config.php_versions:
            for variant in config.variants:
                tags = tuple(generate_tags(
                    aliases,
                    php_version,
                    variant.name,
                    config.default_php_version,
                    config.default_variant,
                    runtime_prefix=config.runtime_prefix,
                ))
                targets.append(BuildTarget(
                    php_version=php_version,
                    variant=variant.name,
                    base=variant.base,
                    cmd=variant.cmd,
                    directory=self.target_dir(php_version, variant.name),
                    tags=tags,
                ))
        return targets

    def required_templates(self) -> List[Path]:
        """List every template file the configured matrix needs."""
        paths = []
        for variant in self.config.variants:
            paths.append(self.dockerfile_template(variant.base))
            if not variant.extras and variant.extras_file:
                paths.append(self.templates_dir / variant.extras_file)
        paths.extend([self.hook_template, self.entrypoint_template])

        unique = []
        for path in paths:
            if path not in unique:
                unique.append(path)
        return unique

    def check_templates(self) -> None:
        """Raise MissingTemplateError for the first template that does not exist."""
        for path in self.required_templates():
            if not path.is_file():
                raise MissingTemplateError(path)

    def variant_extras(self, variant: Variant) -> str:
        """Get the extras block for a variant."""
        if variant.extras:
            return variant.extras
        if variant.extras_file:
            text = self.file_service.read_template(self.templates_dir / variant.extras_file)
            # Same as shell command substitution: trailing newlines are dropped
            return text.rstrip("\n")
        return ""

    def render_target(self, target: BuildTarget) -> List[OutputArtifact]:
        """Render the files of one build target."""
        release = self.config.release
        variant = self.config.get_variant(target.variant)

        dockerfile_context = build_dockerfile_context(
            redaxo_version=release.version,
            redaxo_sha1=release.sha1,
            php_version=target.php_version,
            variant=target.variant,
            extras=self.variant_extras(variant),
            cmd=target.cmd,
        )
        dockerfile = render(
            self.file_service.read_template(self.dockerfile_template(target.base)),
            dockerfile_context,
        )
        hook = render(
            self.file_service.read_template(self.hook_template),
            build_hook_context(target.tags),
        )

        hooks_dir = target.directory / constants.HOOKS_DIR_NAME
        return [
            OutputArtifact(path=target.directory / constants.DOCKERFILE_NAME, content=dockerfile),
            OutputArtifact(path=hooks_dir / constants.HOOK_FILE_NAME, content=hook),
            OutputArtifact(
                path=target.directory / constants.ENTRYPOINT_FILE_NAME,
                source=self.entrypoint_template,
                executable=True,
            ),
        ]

    def write_artifact(self, artifact: OutputArtifact) -> None:
        """Write or copy a single artifact into place."""
        self.file_service.ensure_dir(artifact.path.parent)
        if artifact.source is not None:
            self.file_service.copy_file(artifact.source, artifact.path)
        else:
            self.file_service.write_text(artifact.path, artifact.content)
        if artifact.executable:
            self.file_service.make_executable(artifact.path)

    def run(self, reporter: Optional[Reporter] = None) -> List[BuildTarget]:
        """Generate the whole matrix.

        The release version and all templates are checked, and every file is
        rendered in memory, before anything is written.

        Args:
            reporter: Called with each target once its files are written

        Returns:
            The generated build targets in matrix order

        Raises:
            InvalidVersionError: If the release version is invalid
            MissingTemplateError: If a template file does not exist
            BuildTargetError: If writing a target's files fails
        """
        targets = self.plan()
        self.check_templates()

        rendered = []
        for target in targets:
            try:
                rendered.append((target, self.render_target(target)))
            except (MissingTemplateError, FilesystemError) as e:
                raise BuildTargetError(target.label, e) from e

        for target, artifacts in rendered:
            logger.info(f"Writing {target.label} with tags: {' '.join(target.tags)}")
            try:
                self.file_service.ensure_dir(target.directory)
                for artifact in artifacts:
                    self.write_artifact(artifact)
            except FilesystemError as e:
                raise BuildTargetError(target.label, e) from e
            if reporter:
                reporter(target)

        return targets
