"""Tests for release and matrix configuration models."""

import pytest
from pydantic import ValidationError
from redaxo_images.models.artifact import BuildTarget, OutputArtifact
from redaxo_images.models.release import MatrixConfig, Release, Variant


SHA1 = "ffa10aaab01ffc39425ec31e15c00ec96d948db9"


def make_config(**overrides):
    data = {
        "release": {"version": "5.15.0", "sha1": SHA1},
        "php_versions": ["8.2", "8.1"],
        "default_php_version": "8.1",
        "variants": [
            {"name": "apache", "base": "debian", "cmd": "apache2-foreground"},
            {"name": "fpm", "base": "debian", "cmd": "php-fpm"},
        ],
        "default_variant": "apache",
    }
    data.update(overrides)
    return MatrixConfig(**data)


class TestRelease:
    """Test suite for the Release model."""

    def test_release_keeps_values_as_given(self):
        """Test that neither the version nor the checksum is rewritten."""
        release = Release(version=" 5.15.0\n", sha1=SHA1.upper())

        assert release.version == " 5.15.0\n"
        assert release.sha1 == SHA1.upper()

    @pytest.mark.parametrize("sha1", ["", "abc", SHA1 + "0", "z" * 40, " " + SHA1, SHA1 + "\n"])
    def test_release_rejects_bad_sha1(self, sha1):
        with pytest.raises(ValidationError) as exc_info:
            Release(version="5.15.0", sha1=sha1)

        assert "sha1 must be 40 hexadecimal characters" in str(exc_info.value)

    def test_release_keeps_version_unparsed(self):
        """Test that version grammar is left to the version tree resolver."""
        assert Release(version="5.15.0-beta", sha1=SHA1).version == "5.15.0-beta"


class TestMatrixConfig:
    """Test suite for the MatrixConfig model."""

    def test_valid_config(self):
        config = make_config()

        assert config.variant_names() == ["apache", "fpm"]
        assert config.get_variant("fpm").cmd == "php-fpm"
        assert config.get_variant("apache").extras == ""
        assert config.get_variant("apache").extras_file is None
        assert config.runtime_prefix == "php"
        assert config.templates_dir == "templates"

    def test_get_unknown_variant(self):
        with pytest.raises(KeyError):
            make_config().get_variant("fpm-alpine")

    def test_unknown_default_php_version(self):
        with pytest.raises(ValidationError) as exc_info:
            make_config(default_php_version="7.4")

        assert "default_php_version '7.4' is not in php_versions" in str(exc_info.value)

    def test_unknown_default_variant(self):
        with pytest.raises(ValidationError) as exc_info:
            make_config(default_variant="cli")

        assert "default_variant 'cli' is not in variants" in str(exc_info.value)

    def test_duplicate_php_versions(self):
        with pytest.raises(ValidationError) as exc_info:
            make_config(php_versions=["8.1", "8.1"])

        assert "php_versions must not contain duplicates" in str(exc_info.value)

    def test_duplicate_variants(self):
        variants = [
            {"name": "apache", "base": "debian", "cmd": "apache2-foreground"},
            {"name": "apache", "base": "debian", "cmd": "php-fpm"},
        ]
        with pytest.raises(ValidationError) as exc_info:
            make_config(variants=variants)

        assert "variant names must be unique" in str(exc_info.value)

    def test_empty_axes(self):
        with pytest.raises(ValidationError):
            make_config(php_versions=[])
        with pytest.raises(ValidationError):
            make_config(variants=[])

    def test_unquoted_php_version_rejected(self):
        """Test that YAML floats like 8.1 are not silently turned into strings."""
        with pytest.raises(ValidationError):
            make_config(php_versions=[8.2, 8.1])


class TestArtifacts:
    """Test suite for build target and artifact models."""

    def test_build_target_label(self, tmp_path):
        target = BuildTarget(
            php_version="8.1",
            variant="fpm",
            base="debian",
            cmd="php-fpm",
            directory=tmp_path / "php8.1" / "fpm",
        )

        assert target.label == "php8.1/fpm"
        assert target.tags == ()

    def test_build_target_is_hashable(self, tmp_path):
        """Test that frozen targets can be used in sets and as dict keys."""
        kwargs = dict(
            php_version="8.1", variant="apache", base="debian", cmd="apache2-foreground",
            directory=tmp_path / "php8.1" / "apache", tags=("5.15.0-php8.1-apache", "5.15.0"),
        )

        assert hash(BuildTarget(**kwargs)) == hash(BuildTarget(**kwargs))
        assert len({BuildTarget(**kwargs), BuildTarget(**kwargs)}) == 1

    def test_output_artifact_defaults(self, tmp_path):
        artifact = OutputArtifact(path=tmp_path / "Dockerfile", content="FROM php")

        assert artifact.source is None
        assert artifact.executable is False
