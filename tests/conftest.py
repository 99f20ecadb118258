import pytest
from click.testing import CliRunner
from pathlib import Path


DOCKERFILE_TEMPLATE = """FROM php:%%PHP_VERSION%%-%%VARIANT%%

%%VARIANT_EXTRAS%%

RUN curl -Ls -o /tmp/redaxo.zip https://github.com/redaxo/redaxo/releases/download/%%REDAXO_VERSION%%/redaxo_%%REDAXO_VERSION%%.zip; \\
    echo "%%REDAXO_SHA1%% */tmp/redaxo.zip" | sha1sum -c -

CMD ["%%CMD%%"]
"""

HOOK_TEMPLATE = """#!/bin/bash
for tag in %%TAGS%%; do
    docker push "$DOCKER_REPO:$tag"
done
"""

ENTRYPOINT_TEMPLATE = """#!/bin/bash
exec "$@"
"""

APACHE_EXTRAS = "# enable apache modules\nRUN a2enmod expires headers rewrite\n"

SHA1 = "ffa10aaab01ffc39425ec31e15c00ec96d948db9"

MATRIX_YAML = f"""release:
  version: "5.15.0"
  sha1: {SHA1}
php_versions: ["8.2", "8.1"]
default_php_version: "8.1"
variants:
  - name: apache
    base: debian
    cmd: apache2-foreground
    extras_file: apache-extras
  - name: fpm
    base: debian
    cmd: php-fpm
default_variant: apache
"""


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def templates_dir(tmp_path):
    """Creates a templates directory with the files the matrix needs."""
    path = tmp_path / "templates"
    path.mkdir()
    (path / "Dockerfile-debian").write_text(DOCKERFILE_TEMPLATE)
    (path / "post_push.sh").write_text(HOOK_TEMPLATE)
    (path / "docker-entrypoint.sh").write_text(ENTRYPOINT_TEMPLATE)
    (path / "apache-extras").write_text(APACHE_EXTRAS)
    return path


@pytest.fixture
def config_file(tmp_path, templates_dir):
    """Writes a matrix.yml next to the templates directory."""
    path = tmp_path / "matrix.yml"
    path.write_text(MATRIX_YAML)
    return path


@pytest.fixture
def matrix_config():
    """Provides the default-shaped matrix configuration."""
    from redaxo_images.models.release import MatrixConfig, Release, Variant

    return MatrixConfig(
        release=Release(version="5.15.0", sha1=SHA1),
        php_versions=["8.1", "8.2"],
        default_php_version="8.1",
        variants=[
            Variant(name="apache", base="debian", cmd="apache2-foreground",
                    extras_file="apache-extras"),
            Variant(name="fpm", base="debian", cmd="php-fpm"),
        ],
        default_variant="apache",
    )


@pytest.fixture
def output_dir(tmp_path):
    """Provides an empty output directory."""
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def isolated_cli_runner(cli_runner, tmp_path, monkeypatch):
    """Provides a CLI runner working in an empty temporary directory."""
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return cli_runner


def _snapshot(directory: Path) -> dict:
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def snapshot():
    """Provides a helper mapping every file below a directory to its bytes."""
    return _snapshot
